# Twitter Ads API Client
# File: creative/__init__.py
# Version: v1

"""Creative resources: promoted tweets/accounts, media creatives and cards."""

from .cards import AppDownloadCard, ImageAppDownloadCard, LeadGenCard, VideoAppDownloadCard
from .media_creative import MediaCreative
from .promoted_account import PromotedAccount
from .promoted_tweet import PromotedTweet

__all__ = [
    "AppDownloadCard",
    "ImageAppDownloadCard",
    "LeadGenCard",
    "MediaCreative",
    "PromotedAccount",
    "PromotedTweet",
    "VideoAppDownloadCard",
]
