# Twitter Ads API Client
# File: campaign/__init__.py
# Version: v1

"""Campaign management resources."""

from .campaign import Campaign
from .funding_instrument import FundingInstrument
from .line_item import LineItem
from .promotable_user import PromotableUser
from .targeting_criteria import TargetingCriteria

__all__ = [
    "Campaign",
    "FundingInstrument",
    "LineItem",
    "PromotableUser",
    "TargetingCriteria",
]
