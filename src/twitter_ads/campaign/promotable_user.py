# Twitter Ads API Client
# File: campaign/promotable_user.py
# Version: v1

from __future__ import annotations

from ..config import API_VERSION
from ..resources import PropertyKind, Resource, resource_property


class PromotableUser(Resource):
    """A user whose tweets the account may promote."""

    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/promotable_users"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/promotable_users/{id}"

    id = resource_property(read_only=True)
    promotable_user_type = resource_property(read_only=True)
    user_id = resource_property(read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)
