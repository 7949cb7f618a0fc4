# Twitter Ads API Client
# File: campaign/funding_instrument.py
# Version: v1

from __future__ import annotations

from ..config import API_VERSION
from ..resources import PropertyKind, Resource, resource_property


class FundingInstrument(Resource):
    """Credit line or card a campaign spends from. Read-only over the API."""

    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/funding_instruments"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/funding_instruments/{id}"

    id = resource_property(read_only=True)
    name = resource_property(read_only=True)
    account_id = resource_property(read_only=True)
    description = resource_property(read_only=True)
    type = resource_property(read_only=True)
    currency = resource_property(read_only=True)
    entity_status = resource_property(read_only=True)
    cancelled = resource_property(PropertyKind.BOOL, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)
    able_to_fund = resource_property(PropertyKind.BOOL, read_only=True)
    reasons_not_able_to_fund = resource_property(read_only=True)
    credit_limit_local_micro = resource_property(read_only=True)
    credit_remaining_local_micro = resource_property(read_only=True)
    funded_amount_local_micro = resource_property(read_only=True)
    start_time = resource_property(PropertyKind.TIME, read_only=True)
    end_time = resource_property(PropertyKind.TIME, read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
