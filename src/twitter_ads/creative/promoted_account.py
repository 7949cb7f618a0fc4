# Twitter Ads API Client
# File: creative/promoted_account.py
# Version: v1

from __future__ import annotations

from ..config import API_VERSION
from ..resources import Persistence, PropertyKind, Resource, resource_property


class PromotedAccount(Persistence, Resource):
    """A user account promoted by a follower-objective line item."""

    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/promoted_accounts"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/promoted_accounts/{id}"

    id = resource_property(read_only=True)
    approval_status = resource_property(read_only=True)
    entity_status = resource_property(read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)

    line_item_id = resource_property()
    user_id = resource_property()
