# Twitter Ads API Client
# File: creative/media_creative.py
# Version: v1

from __future__ import annotations

from ..config import API_VERSION
from ..resources import Analytics, Persistence, PropertyKind, Resource, resource_property


class MediaCreative(Analytics, Persistence, Resource):
    """Account media placed on a line item (publisher network creatives)."""

    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/media_creatives"
    RESOURCE_STATS = "/" + API_VERSION + "/stats/accounts/{account_id}"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/media_creatives/{id}"
    ANALYTICS_ENTITY = "MEDIA_CREATIVE"

    id = resource_property(read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
    approval_status = resource_property(read_only=True)
    serving_status = resource_property(read_only=True)

    line_item_id = resource_property()
    account_media_id = resource_property()
    landing_url = resource_property()
