# Twitter Ads API Client
# File: creative/promoted_tweet.py
# Version: v2

"""Tweets promoted through a line item."""

from __future__ import annotations

from ..config import API_VERSION
from ..resources import Analytics, Persistence, PropertyKind, Resource, resource_property


class PromotedTweet(Analytics, Persistence, Resource):
    RESOURCE_COLLECTION = "/" + API_VERSION + "/accounts/{account_id}/promoted_tweets"
    RESOURCE_STATS = "/" + API_VERSION + "/stats/accounts/{account_id}"
    RESOURCE = "/" + API_VERSION + "/accounts/{account_id}/promoted_tweets/{id}"
    ANALYTICS_ENTITY = "PROMOTED_TWEET"

    id = resource_property(read_only=True)
    approval_status = resource_property(read_only=True)
    entity_status = resource_property(read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)

    line_item_id = resource_property()
    tweet_id = resource_property()
