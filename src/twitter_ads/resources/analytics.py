# Twitter Ads API Client
# File: resources/analytics.py
# Version: v2

"""Synchronous stats endpoint support."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from ..enum import Granularity, Placement
from ..http.request import Request
from ..utils import join_ids, to_time, utc_now

if TYPE_CHECKING:
    from ..account import Account

DEFAULT_WINDOW = timedelta(days=7)


class Analytics:
    """Mixin for resources exposing ``RESOURCE_STATS``.

    Subclasses set ``ANALYTICS_ENTITY`` to the API's entity name
    (``LINE_ITEM``, ``PROMOTED_TWEET``, ...).
    """

    RESOURCE_STATS: Optional[str] = None
    ANALYTICS_ENTITY: Optional[str] = None

    @classmethod
    def all_stats(
        cls,
        account: "Account",
        ids: Iterable[str],
        metric_groups: Iterable[str],
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        granularity: str = Granularity.HOUR,
        placement: str = Placement.ALL_ON_TWITTER,
        **opts: Any,
    ) -> List[Dict[str, Any]]:
        """Fetch metrics for several objects of this type at once.

        Defaults to the last seven days, ending at the top of the current
        hour, with hourly granularity.
        """
        if cls.RESOURCE_STATS is None:
            raise NotImplementedError(f"{cls.__name__} has no stats endpoint")

        if end_time is None:
            end_time = utc_now().replace(minute=0, second=0, microsecond=0)
        if start_time is None:
            start_time = end_time - DEFAULT_WINDOW

        params: Dict[str, Any] = {
            "metric_groups": join_ids(metric_groups),
            "start_time": to_time(start_time, granularity),
            "end_time": to_time(end_time, granularity),
            "granularity": str(granularity).upper(),
            "entity": cls.ANALYTICS_ENTITY,
            "placement": placement,
            "entity_ids": join_ids(ids),
        }
        params.update(opts)

        resource = cls.RESOURCE_STATS.format(account_id=account.id)
        response = Request(account.client, "GET", resource, params=params).perform()
        return response.body["data"]

    def stats(self: Any, metric_groups: Iterable[str], **opts: Any) -> List[Dict[str, Any]]:
        """Fetch metrics for this object only."""
        self._validate_loaded()
        return type(self).all_stats(self.account, [self.id], metric_groups, **opts)
