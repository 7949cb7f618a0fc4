# Twitter Ads API Client
# File: audiences/__init__.py
# Version: v1

from .tailored_audience import TailoredAudience

__all__ = ["TailoredAudience"]
