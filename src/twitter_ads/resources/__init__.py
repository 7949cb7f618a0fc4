# Twitter Ads API Client
# File: resources/__init__.py
# Version: v1

"""Building blocks shared by every resource type."""

from .analytics import Analytics
from .dsl import (
    DSL,
    PropertyDescriptor,
    PropertyKind,
    declare_property,
    hydrate,
    list_properties,
    resource_property,
    serialize,
)
from .resource import Persistence, Resource

__all__ = [
    "Analytics",
    "DSL",
    "Persistence",
    "PropertyDescriptor",
    "PropertyKind",
    "Resource",
    "declare_property",
    "hydrate",
    "list_properties",
    "resource_property",
    "serialize",
]
