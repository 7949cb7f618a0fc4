# Twitter Ads API Client
# File: targeting_criteria/__init__.py
# Version: v1

"""Lookup collections used to build targeting criteria."""

from .lookups import AppStoreCategory, Device, NetworkOperator, PlatformVersion, TVChannel

__all__ = [
    "AppStoreCategory",
    "Device",
    "NetworkOperator",
    "PlatformVersion",
    "TVChannel",
]
