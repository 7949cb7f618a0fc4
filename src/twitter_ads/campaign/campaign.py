# Twitter Ads API Client
# File: campaign/campaign.py
# Version: v2

"""Campaigns group line items under one funding instrument and budget."""

from __future__ import annotations

from ..config import API_VERSION
from ..resources import Analytics, Persistence, PropertyKind, Resource, resource_property


class Campaign(Analytics, Persistence, Resource):
    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/campaigns"
    RESOURCE_STATS = "/" + API_VERSION + "/stats/accounts/{account_id}"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/campaigns/{id}"
    ANALYTICS_ENTITY = "CAMPAIGN"

    id = resource_property()
    reasons_not_servable = resource_property(read_only=True)
    servable = resource_property(PropertyKind.BOOL, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)

    name = resource_property()
    funding_instrument_id = resource_property()
    end_time = resource_property(PropertyKind.TIME)
    start_time = resource_property(PropertyKind.TIME)
    entity_status = resource_property()
    currency = resource_property()
    standard_delivery = resource_property(PropertyKind.BOOL)
    daily_budget_amount_local_micro = resource_property()
    total_budget_amount_local_micro = resource_property()
    duration_in_days = resource_property()
    frequency_cap = resource_property()
