# Twitter Ads API Client
# File: campaign/line_item.py
# Version: v3

"""Line items: bidding, targeting and placement for a campaign."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..config import API_VERSION
from ..http.request import Request
from ..resources import Analytics, Persistence, PropertyKind, Resource, resource_property
from .targeting_criteria import TargetingCriteria

if TYPE_CHECKING:
    from ..client import Client


class LineItem(Analytics, Persistence, Resource):
    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/line_items"
    RESOURCE_STATS = "/" + API_VERSION + "/stats/accounts/{account_id}"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/line_items/{id}"
    PLACEMENTS = "/" + API_VERSION + "/line_items/placements"
    ANALYTICS_ENTITY = "LINE_ITEM"

    id = resource_property(read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)

    name = resource_property()
    campaign_id = resource_property()
    advertiser_domain = resource_property()
    advertiser_user_id = resource_property()
    android_app_store_identifier = resource_property()
    ios_app_store_identifier = resource_property()
    automatically_select_bid = resource_property(PropertyKind.BOOL)
    bid_amount_local_micro = resource_property()
    bid_type = resource_property()
    bid_unit = resource_property()
    charge_by = resource_property()
    categories = resource_property()
    entity_status = resource_property()
    objective = resource_property()
    optimization = resource_property()
    placements = resource_property()
    primary_web_event_tag = resource_property()
    product_type = resource_property()
    start_time = resource_property(PropertyKind.TIME)
    end_time = resource_property(PropertyKind.TIME)
    target_cpa_local_micro = resource_property()
    total_budget_amount_local_micro = resource_property()
    tracking_tags = resource_property()

    @classmethod
    def valid_placements(
        cls, client: "Client", product_type: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Placement combinations the API accepts, optionally for one product."""
        params = {"product_type": product_type} if product_type else None
        response = Request(client, "GET", cls.PLACEMENTS, params=params).perform()
        return response.body["data"]

    def targeting_criteria(self, id: Optional[str] = None, **opts: Any) -> Any:
        """Targeting criteria attached to this line item (one or all)."""
        self._validate_loaded()
        if id:
            return TargetingCriteria.load(self.account, id, **opts)
        return TargetingCriteria.all(self.account, [self.id], **opts)
