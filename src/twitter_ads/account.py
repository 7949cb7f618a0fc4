# Twitter Ads API Client
# File: account.py
# Version: v4

"""Ads accounts: the entry point to every account-scoped resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from .audiences import TailoredAudience
from .campaign import Campaign, FundingInstrument, LineItem, PromotableUser
from .config import API_VERSION
from .creative import AppDownloadCard, MediaCreative, PromotedTweet
from .cursor import Cursor
from .errors import NotLoadedError
from .http.request import Request
from .resources import DSL, PropertyKind, resource_property

if TYPE_CHECKING:
    from .client import Client


class Account(DSL):
    """An advertiser account, bound to the client used to reach it.

    Collection helpers take an optional id: with an id they load that one
    object, without it they return a Cursor over all of them::

        account = Account.load(client, "18ce54d4x5t")
        for campaign in account.campaigns(with_deleted=True):
            ...
        line_item = account.line_items("abc1")
    """

    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts"
    RESOURCE = "/" + API_VERSION + "/accounts/{id}"
    FEATURES = "/" + API_VERSION + "/accounts/{id}/features"

    id = resource_property(read_only=True)
    name = resource_property(read_only=True)
    salt = resource_property(read_only=True)
    timezone = resource_property(read_only=True)
    timezone_switch_at = resource_property(PropertyKind.TIME, read_only=True)
    approval_status = resource_property(read_only=True)
    business_id = resource_property(read_only=True)
    business_name = resource_property(read_only=True)
    industry_type = resource_property(read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)

    def __init__(self, client: "Client") -> None:
        super().__init__()
        self._client = client

    @property
    def client(self) -> "Client":
        return self._client

    @classmethod
    def load(cls, client: "Client", id: str, **opts: Any) -> "Account":
        resource = cls.RESOURCE.format(id=id)
        response = Request(client, "GET", resource, params=opts).perform()
        return cls(client).from_response(response.body["data"])

    @classmethod
    def all(cls, client: "Client", **opts: Any) -> Cursor:
        request = Request(client, "GET", cls.RESOURCE_COLLECTION, params=opts)
        return Cursor(cls, request, init_with=[client])

    def _validate_loaded(self) -> None:
        if self.id is None:
            raise NotLoadedError(self)

    def reload(self, **opts: Any) -> "Account":
        self._validate_loaded()
        resource = self.RESOURCE.format(id=self.id)
        response = Request(self._client, "GET", resource, params=opts).perform()
        return self.from_response(response.body["data"])

    def features(self) -> List[str]:
        """Beta features enabled for this account."""
        self._validate_loaded()
        resource = self.FEATURES.format(id=self.id)
        response = Request(self._client, "GET", resource).perform()
        return response.body["data"]

    def _load_resource(self, klass: Any, id: Optional[str], **opts: Any) -> Any:
        self._validate_loaded()
        return klass.load(self, id, **opts) if id else klass.all(self, **opts)

    def promotable_users(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(PromotableUser, id, **opts)

    def promoted_tweets(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(PromotedTweet, id, **opts)

    def funding_instruments(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(FundingInstrument, id, **opts)

    def campaigns(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(Campaign, id, **opts)

    def line_items(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(LineItem, id, **opts)

    def media_creatives(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(MediaCreative, id, **opts)

    def app_download_cards(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(AppDownloadCard, id, **opts)

    def tailored_audiences(self, id: Optional[str] = None, **opts: Any) -> Any:
        return self._load_resource(TailoredAudience, id, **opts)
