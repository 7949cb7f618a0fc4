# Twitter Ads API Client
# File: version.py
# Version: v1

"""Distribution version lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


def _resolve_version() -> str:
    """Resolve installed distribution version.

    Uses Python package metadata so __version__ stays aligned with pyproject.toml.
    Falls back to a reasonable default when running from source without an
    installed distribution.
    """
    try:
        return version("twitter-ads-client")
    except PackageNotFoundError:
        return "5.0.0"


__version__ = _resolve_version()
