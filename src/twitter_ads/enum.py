# Twitter Ads API Client
# File: enum.py
# Version: v2

"""String constants accepted by the Ads API."""

from __future__ import annotations

from typing import Tuple


def values(group: type) -> Tuple[str, ...]:
    """Constants declared on ``group``, in declaration order."""
    return tuple(
        value
        for name, value in vars(group).items()
        if not name.startswith("_") and isinstance(value, str)
    )


class Objective:
    APP_ENGAGEMENTS = "APP_ENGAGEMENTS"
    APP_INSTALLS = "APP_INSTALLS"
    FOLLOWERS = "FOLLOWERS"
    LEAD_GENERATION = "LEAD_GENERATION"
    TWEET_ENGAGEMENTS = "TWEET_ENGAGEMENTS"
    VIDEO_VIEWS = "VIDEO_VIEWS"
    WEBSITE_CLICKS = "WEBSITE_CLICKS"
    WEBSITE_CONVERSIONS = "WEBSITE_CONVERSIONS"


class Product:
    PROMOTED_ACCOUNT = "PROMOTED_ACCOUNT"
    PROMOTED_TWEETS = "PROMOTED_TWEETS"


class Placement:
    ALL_ON_TWITTER = "ALL_ON_TWITTER"
    TWITTER_SEARCH = "TWITTER_SEARCH"
    TWITTER_TIMELINE = "TWITTER_TIMELINE"
    PUBLISHER_NETWORK = "PUBLISHER_NETWORK"


class BidUnit:
    APP_CLICK = "APP_CLICK"
    APP_INSTALL = "APP_INSTALL"
    ENGAGEMENT = "ENGAGEMENT"
    FOLLOW = "FOLLOW"
    LEAD = "LEAD"
    LINK_CLICK = "LINK_CLICK"
    VIEW = "VIEW"
    VIEW_3S_100PCT = "VIEW_3S_100PCT"


class BidType:
    MAX = "MAX"
    AUTO = "AUTO"
    TARGET = "TARGET"


# Same values as BidUnit.
ChargeBy = BidUnit


class MetricGroup:
    ENGAGEMENT = "ENGAGEMENT"
    WEB_CONVERSION = "WEB_CONVERSION"
    MOBILE_CONVERSION = "MOBILE_CONVERSION"
    MEDIA = "MEDIA"
    VIDEO = "VIDEO"
    BILLING = "BILLING"
    LIFE_TIME_VALUE_MOBILE_CONVERSION = "LIFE_TIME_VALUE_MOBILE_CONVERSION"


class Granularity:
    HOUR = "HOUR"
    DAY = "DAY"
    TOTAL = "TOTAL"


class Entity:
    ACCOUNT = "ACCOUNT"
    FUNDING_INSTRUMENT = "FUNDING_INSTRUMENT"
    CAMPAIGN = "CAMPAIGN"
    LINE_ITEM = "LINE_ITEM"
    PROMOTED_TWEET = "PROMOTED_TWEET"
    ORGANIC_TWEET = "ORGANIC_TWEET"
    MEDIA_CREATIVE = "MEDIA_CREATIVE"


class EntityStatus:
    ACTIVE = "ACTIVE"
    DRAFT = "DRAFT"
    PAUSED = "PAUSED"


class MediaCategory:
    AMPLIFY_VIDEO = "AMPLIFY_VIDEO"
    TWEET_GIF = "TWEET_GIF"
    TWEET_IMAGE = "TWEET_IMAGE"
    TWEET_VIDEO = "TWEET_VIDEO"


class JobStatus:
    QUEUED = "QUEUED"
    PROCESSING = "PROCESSING"
    UPLOADING = "UPLOADING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class TAListTypes:
    EMAIL = "EMAIL"
    DEVICE_ID = "DEVICE_ID"
    TWITTER_ID = "TWITTER_ID"
    HANDLE = "HANDLE"
    PHONE_NUMBER = "PHONE_NUMBER"


class TAOperations:
    ADD = "ADD"
    REMOVE = "REMOVE"
    REPLACE = "REPLACE"
