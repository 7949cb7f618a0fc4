# Twitter Ads API Client
# File: campaign/targeting_criteria.py
# Version: v2

"""Targeting criteria attached to line items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from ..config import API_VERSION
from ..cursor import Cursor
from ..http.request import Request
from ..resources import Persistence, PropertyKind, Resource, resource_property
from ..utils import join_ids

if TYPE_CHECKING:
    from ..account import Account


class TargetingCriteria(Persistence, Resource):
    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/targeting_criteria"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/targeting_criteria/{id}"

    id = resource_property(read_only=True)
    name = resource_property(read_only=True)
    localized_name = resource_property(read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)

    line_item_id = resource_property()
    operator_type = resource_property()
    targeting_type = resource_property()
    targeting_value = resource_property()
    tailored_audience_expansion = resource_property(PropertyKind.BOOL)

    @classmethod
    def all(  # type: ignore[override]
        cls, account: "Account", line_item_ids: Iterable[str], **opts: Any
    ) -> Cursor:
        """Cursor over the criteria of the given line items (the API requires them)."""
        params = {"line_item_ids": join_ids(line_item_ids)}
        params.update(opts)
        resource = cls.RESOURCE_COLLECTION.format(account_id=account.id)
        request = Request(account.client, "GET", resource, params=params)
        return Cursor(cls, request, init_with=[account])
