# Twitter Ads API Client
# File: __init__.py
# Version: v2

"""Python client for the Twitter Ads REST API."""

from __future__ import annotations

from .account import Account
from .audiences import TailoredAudience
from .campaign import Campaign, FundingInstrument, LineItem, PromotableUser, TargetingCriteria
from .client import Client
from .config import API_VERSION, ClientConfig
from .cursor import Cursor
from .errors import (
    APIError,
    BadRequest,
    ClientError,
    ConfigurationError,
    Forbidden,
    NotFound,
    NotLoadedError,
    RateLimit,
    ServerError,
    ServiceUnavailable,
    TransportError,
    TwitterAdsError,
    Unauthorized,
)
from .http import Request, Response
from .version import __version__

__all__ = [
    "API_VERSION",
    "APIError",
    "Account",
    "BadRequest",
    "Campaign",
    "Client",
    "ClientConfig",
    "ClientError",
    "ConfigurationError",
    "Cursor",
    "Forbidden",
    "FundingInstrument",
    "LineItem",
    "NotFound",
    "NotLoadedError",
    "PromotableUser",
    "RateLimit",
    "Request",
    "Response",
    "ServerError",
    "ServiceUnavailable",
    "TailoredAudience",
    "TargetingCriteria",
    "TransportError",
    "TwitterAdsError",
    "Unauthorized",
    "__version__",
]
