# Twitter Ads API Client
# File: targeting_criteria/lookups.py
# Version: v2

"""Read-only catalogues of targetable values.

These collections are global rather than per account; the account passed to
``all`` only provides the client used to sign the request.
"""

from __future__ import annotations

from ..config import API_VERSION
from ..resources import Resource, resource_property

_TARGETING = "/" + API_VERSION + "/targeting_criteria"


class _TargetingValue(Resource):
    id = resource_property(read_only=True)
    name = resource_property(read_only=True)
    targeting_type = resource_property(read_only=True)
    targeting_value = resource_property(read_only=True)


class Device(_TargetingValue):
    RESOURCE_COLLECTION = _TARGETING + "/devices"

    platform = resource_property(read_only=True)
    manufacturer = resource_property(read_only=True)


class PlatformVersion(_TargetingValue):
    RESOURCE_COLLECTION = _TARGETING + "/platform_versions"

    platform = resource_property(read_only=True)
    number = resource_property(read_only=True)


class NetworkOperator(_TargetingValue):
    RESOURCE_COLLECTION = _TARGETING + "/network_operators"

    country_code = resource_property(read_only=True)


class AppStoreCategory(_TargetingValue):
    RESOURCE_COLLECTION = _TARGETING + "/app_store_categories"

    store = resource_property(read_only=True)
    os_type = resource_property(read_only=True)


class TVChannel(Resource):
    RESOURCE_COLLECTION = _TARGETING + "/tv_channels"

    id = resource_property(read_only=True)
    name = resource_property(read_only=True)
