# Twitter Ads API Client
# File: http/__init__.py
# Version: v1

"""HTTP request/response primitives."""

from .request import Request
from .response import Response

__all__ = ["Request", "Response"]
