# Twitter Ads API Client
# File: cursor.py
# Version: v3

"""Lazy iteration over paginated collection endpoints.

Collection responses look like::

    {"data": [...], "next_cursor": "c-123", "total_count": 42}

A Cursor holds the request for the first page and only issues it when the
first item is asked for. Each following page is the same request with
``cursor=<next_cursor>`` added to its params. When a page comes back without
a ``next_cursor`` and its items have been handed out, the Cursor is
exhausted and stays that way.
"""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Any, Deque, Iterator, List, Optional, Sequence

from .http.request import Request
from .http.response import Response


class Cursor(Iterator[Any]):
    """Single-pass iterator over every item of a collection endpoint.

    ``klass`` is the resource type items are hydrated into (constructed as
    ``klass(*init_with)``); with ``klass=None`` the decoded dicts are yielded
    as they are. Iterating again after exhaustion yields nothing and makes no
    HTTP call; use ``reset()`` to start over from the first page.

    Not safe to advance from several threads at once.
    """

    def __init__(
        self,
        klass: Optional[type],
        request: Request,
        init_with: Sequence[Any] = (),
    ) -> None:
        self._klass = klass
        self._request = request
        self._init_with = tuple(init_with)
        self.reset()

    def __repr__(self) -> str:
        name = self._klass.__name__ if self._klass else "dict"
        return f"<Cursor of {name} {self._request!r} exhausted={self.exhausted}>"

    @property
    def request(self) -> Request:
        return self._request

    @property
    def exhausted(self) -> bool:
        return self._last_page and not self._buffer

    def reset(self) -> None:
        """Forget all fetched pages; the next advance re-issues the first request."""
        self._buffer: Deque[Any] = deque()
        self._next_cursor: Optional[str] = None
        self._fetched = False
        self._last_page = False
        self.total_count: Optional[int] = None

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> Any:
        while not self._buffer:
            if self._last_page:
                raise StopIteration
            self._fetch_next()
        return self._materialize(self._buffer.popleft())

    def _fetch_next(self) -> None:
        if self._fetched:
            request = self._request.with_params(cursor=self._next_cursor)
        else:
            request = self._request

        response = request.perform()
        self._fetched = True
        self._load(response)

    def _load(self, response: Response) -> None:
        body = response.body
        if not isinstance(body, dict):
            body = {}

        data = body.get("data")
        if isinstance(data, dict):
            data = [data]
        self._buffer.extend(data or [])

        if body.get("total_count") is not None:
            try:
                self.total_count = int(body["total_count"])
            except (TypeError, ValueError):
                self.total_count = None

        self._next_cursor = body.get("next_cursor") or None
        self._last_page = self._next_cursor is None

    def _materialize(self, item: Any) -> Any:
        if self._klass is None:
            return item
        return self._klass(*self._init_with).from_response(item)

    def _fresh(self) -> "Cursor":
        return Cursor(self._klass, self._request, self._init_with)

    # ------------------------------------------------------------------
    # Conveniences
    # ------------------------------------------------------------------

    def first(self) -> Any:
        """Next item from this cursor, or None if there is none."""
        return next(self, None)

    def to_list(self) -> List[Any]:
        """Drain the remaining items of this cursor into a list."""
        return list(self)

    def count(self) -> int:
        """Number of items in the collection.

        Uses ``total_count`` when a page reported one; otherwise drains a
        fresh copy of this cursor (one request per page).
        """
        if self.total_count is not None:
            return self.total_count
        return sum(1 for _ in self._fresh())

    def __getitem__(self, index: int) -> Any:
        """Item at ``index``, counted from the first page.

        O(n): a fresh copy of the cursor is walked up to ``index``.
        """
        if not isinstance(index, int):
            raise TypeError("Cursor indices must be integers")
        if index < 0:
            raise IndexError("Cursor does not support negative indices")

        for item in islice(self._fresh(), index, index + 1):
            return item
        raise IndexError("Cursor index out of range")
