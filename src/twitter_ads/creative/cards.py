# Twitter Ads API Client
# File: creative/cards.py
# Version: v3

"""Card creatives.

All cards share the read-only bookkeeping fields declared on ``_Card``;
each subclass adds its own writable fields and endpoints.
"""

from __future__ import annotations

from ..config import API_VERSION
from ..resources import Persistence, PropertyKind, Resource, resource_property

_CARDS = "/" + API_VERSION + "/accounts/{account_id}/cards"


class _Card(Persistence, Resource):
    id = resource_property(read_only=True)
    preview_url = resource_property(read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)
    updated_at = resource_property(PropertyKind.TIME, read_only=True)

    name = resource_property()


class AppDownloadCard(_Card):
    RESOURCE_COLLECTION = _CARDS + "/app_download"
    RESOURCE = _CARDS + "/app_download/{id}"

    app_country_code = resource_property()
    iphone_app_id = resource_property()
    iphone_deep_link = resource_property()
    ipad_app_id = resource_property()
    ipad_deep_link = resource_property()
    googleplay_app_id = resource_property()
    googleplay_deep_link = resource_property()
    app_cta = resource_property()
    custom_icon_media_id = resource_property()
    custom_app_description = resource_property()


class ImageAppDownloadCard(_Card):
    RESOURCE_COLLECTION = _CARDS + "/image_app_download"
    RESOURCE = _CARDS + "/image_app_download/{id}"

    app_country_code = resource_property()
    iphone_app_id = resource_property()
    iphone_deep_link = resource_property()
    ipad_app_id = resource_property()
    ipad_deep_link = resource_property()
    googleplay_app_id = resource_property()
    googleplay_deep_link = resource_property()
    app_cta = resource_property()
    wide_app_image_media_id = resource_property()


class VideoAppDownloadCard(_Card):
    RESOURCE_COLLECTION = _CARDS + "/video_app_download"
    RESOURCE = _CARDS + "/video_app_download/{id}"

    video_url = resource_property(read_only=True)
    video_poster_url = resource_property(read_only=True)

    app_country_code = resource_property()
    iphone_app_id = resource_property()
    iphone_deep_link = resource_property()
    ipad_app_id = resource_property()
    ipad_deep_link = resource_property()
    googleplay_app_id = resource_property()
    googleplay_deep_link = resource_property()
    app_cta = resource_property()
    image_media_id = resource_property()
    video_id = resource_property()


class LeadGenCard(_Card):
    RESOURCE_COLLECTION = _CARDS + "/lead_gen"
    RESOURCE = _CARDS + "/lead_gen/{id}"

    image_display_height = resource_property(read_only=True)
    image_display_width = resource_property(read_only=True)

    cta = resource_property()
    fallback_url = resource_property()
    image_media_id = resource_property()
    privacy_policy_url = resource_property()
    title = resource_property()
    submit_url = resource_property()
    submit_method = resource_property()
    custom_destination_url = resource_property()
    custom_destination_text = resource_property()
    custom_key_email = resource_property()
    custom_key_name = resource_property()
    custom_key_screen_name = resource_property()
