# Twitter Ads API Client
# File: audiences/tailored_audience.py
# Version: v3

"""Tailored audiences built from uploaded user lists.

Uploading the list file itself is done elsewhere; the methods here take the
location the upload service returned (``input_file_path``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from ..config import API_VERSION
from ..cursor import Cursor
from ..enum import TAListTypes, TAOperations, values
from ..errors import ClientError
from ..http.request import Request
from ..resources import PropertyKind, Resource, resource_property

if TYPE_CHECKING:
    from ..account import Account

LIST_TYPES = values(TAListTypes)
OPERATIONS = values(TAOperations)


class TailoredAudience(Resource):
    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/tailored_audiences"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/tailored_audiences/{id}"
    RESOURCE_UPDATE = "/" + API_VERSION + "/accounts/{account_id}/tailored_audience_changes"
    GLOBAL_OPT_OUT = (
        "/" + API_VERSION + "/accounts/{account_id}/tailored_audiences/global_opt_out"
    )

    id = resource_property(read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)

    name = resource_property()
    list_type = resource_property()

    audience_size = resource_property(read_only=True)
    audience_type = resource_property(read_only=True)
    metadata = resource_property(read_only=True)
    partner_source = resource_property(read_only=True)
    reasons_not_targetable = resource_property(read_only=True)
    targetable = resource_property(PropertyKind.BOOL, read_only=True)
    targetable_types = resource_property(read_only=True)

    @classmethod
    def create(
        cls,
        account: "Account",
        input_file_path: str,
        name: str,
        list_type: str,
    ) -> "TailoredAudience":
        """Create an audience and seed it from an uploaded list.

        If seeding fails with a 4xx the half-created audience is deleted
        before the error is re-raised.
        """
        _check_list_type(list_type)
        audience = cls(account)
        params = {"name": name, "list_type": list_type}
        resource = cls.RESOURCE_COLLECTION.format(account_id=account.id)
        response = Request(account.client, "POST", resource, params=params).perform()
        audience.from_response(response.body["data"])

        try:
            audience._change(input_file_path, list_type, TAOperations.ADD)
            return audience.reload()
        except ClientError:
            audience.delete()
            raise

    @classmethod
    def opt_out(cls, account: "Account", input_file_path: str, list_type: str) -> bool:
        """Add the users in an uploaded list to the account's global opt-out."""
        _check_list_type(list_type)
        params = {"input_file_path": input_file_path, "list_type": list_type}
        resource = cls.GLOBAL_OPT_OUT.format(account_id=account.id)
        Request(account.client, "PUT", resource, params=params).perform()
        return True

    def update(
        self,
        input_file_path: str,
        list_type: str,
        operation: str = TAOperations.ADD,
    ) -> "TailoredAudience":
        """Apply an uploaded list to this audience and reload it."""
        self._validate_loaded()
        _check_list_type(list_type)
        self._change(input_file_path, list_type, operation)
        return self.reload()

    def delete(self) -> "TailoredAudience":
        self._validate_loaded()
        resource = self._path(self.RESOURCE, id=self.id)
        response = Request(self.client, "DELETE", resource).perform()
        return self.from_response(response.body["data"])

    def status(self) -> List[Dict[str, Any]]:
        """Pending and processed changes for this audience."""
        self._validate_loaded()
        resource = self._path(self.RESOURCE_UPDATE)
        request = Request(self.client, "GET", resource, params=self.to_params())
        return [
            change
            for change in Cursor(None, request)
            if change.get("tailored_audience_id") == self.id
        ]

    def _change(self, input_file_path: str, list_type: str, operation: str) -> None:
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation {operation!r}; expected one of {OPERATIONS}")
        params = {
            "tailored_audience_id": self.id,
            "input_file_path": input_file_path,
            "list_type": list_type,
            "operation": operation,
        }
        resource = self._path(self.RESOURCE_UPDATE)
        Request(self.client, "POST", resource, params=params).perform()


def _check_list_type(list_type: str) -> None:
    if list_type not in LIST_TYPES:
        raise ValueError(f"Unknown list type {list_type!r}; expected one of {LIST_TYPES}")
