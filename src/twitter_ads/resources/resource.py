# Twitter Ads API Client
# File: resources/resource.py
# Version: v3

"""Account-scoped resource base classes.

``RESOURCE_COLLECTION`` and ``RESOURCE`` are path templates filled with
``str.format`` (``{account_id}`` and ``{id}``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

from ..cursor import Cursor
from ..errors import NotLoadedError
from ..http.request import Request
from .dsl import DSL

if TYPE_CHECKING:
    from ..account import Account
    from ..client import Client

R = TypeVar("R", bound="Resource")


class Resource(DSL):
    """A resource owned by an ads account."""

    RESOURCE_COLLECTION: Optional[str] = None
    RESOURCE: Optional[str] = None

    def __init__(self, account: "Account") -> None:
        super().__init__()
        self._account = account

    @property
    def account(self) -> "Account":
        return self._account

    @property
    def client(self) -> "Client":
        return self._account.client

    def _path(self, template: Optional[str], **ids: Any) -> str:
        if template is None:
            raise NotImplementedError(
                f"{type(self).__name__} does not define this endpoint"
            )
        return template.format(account_id=self._account.id, **ids)

    def _validate_loaded(self) -> None:
        if self._values.get("id") is None:
            raise NotLoadedError(self)

    @classmethod
    def all(cls, account: "Account", **opts: Any) -> Cursor:
        """Cursor over every object of this type visible to ``account``."""
        if cls.RESOURCE_COLLECTION is None:
            raise NotImplementedError(f"{cls.__name__} has no collection endpoint")
        resource = cls.RESOURCE_COLLECTION.format(account_id=account.id)
        request = Request(account.client, "GET", resource, params=opts)
        return Cursor(cls, request, init_with=[account])

    @classmethod
    def load(cls: Type[R], account: "Account", id: str, **opts: Any) -> R:
        """Fetch a single object by id (deleted objects included by default)."""
        if cls.RESOURCE is None:
            raise NotImplementedError(f"{cls.__name__} has no single-object endpoint")
        params = {"with_deleted": True}
        params.update(opts)
        resource = cls.RESOURCE.format(account_id=account.id, id=id)
        response = Request(account.client, "GET", resource, params=params).perform()
        return cls(account).from_response(response.body["data"])

    def reload(self: R, **opts: Any) -> R:
        """Refresh every property from the API."""
        self._validate_loaded()
        params = {"with_deleted": True}
        params.update(opts)
        resource = self._path(self.RESOURCE, id=self.id)
        response = Request(self.client, "GET", resource, params=params).perform()
        return self.from_response(response.body["data"])


class Persistence:
    """Create, update and delete support for writable resources."""

    def save(self: Any) -> Any:
        """POST a new object, or PUT the changes of an existing one.

        Only writable properties are sent.
        """
        if self.id:
            resource = self._path(self.RESOURCE, id=self.id)
            method = "PUT"
        else:
            resource = self._path(self.RESOURCE_COLLECTION)
            method = "POST"

        params = self.to_params(writable_only=True)
        response = Request(self.client, method, resource, params=params).perform()
        return self.from_response(response.body["data"])

    def delete(self: Any) -> Any:
        """Delete the object; the API returns it with ``deleted`` set."""
        self._validate_loaded()
        resource = self._path(self.RESOURCE, id=self.id)
        response = Request(self.client, "DELETE", resource).perform()
        return self.from_response(response.body["data"])
