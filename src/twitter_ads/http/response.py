# Twitter Ads API Client
# File: http/response.py
# Version: v2

"""Read-only wrapper around a completed HTTP exchange."""

from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional, Tuple


class Response:
    """Status, headers and body of one Ads API call.

    ``headers`` keeps the order and duplicates the server sent. ``body`` is
    decoded from ``raw_body`` on first access and cached afterwards.
    """

    _UNSET = object()

    def __init__(
        self,
        status_code: int,
        headers: Iterable[Tuple[str, str]] = (),
        raw_body: str = "",
    ) -> None:
        self._status_code = int(status_code)
        self._headers: List[Tuple[str, str]] = [
            (str(name), str(value)) for name, value in headers
        ]
        self._raw_body = raw_body or ""
        self._body: Any = self._UNSET

    def __repr__(self) -> str:
        return f"<Response status_code={self._status_code}>"

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def headers(self) -> List[Tuple[str, str]]:
        return list(self._headers)

    @property
    def raw_body(self) -> str:
        return self._raw_body

    @property
    def error(self) -> bool:
        return self._status_code >= 400

    @property
    def body(self) -> Any:
        """Decoded JSON payload, or None when the response had no body.

        Raises ValueError if the payload is not valid JSON.
        """
        if self._body is self._UNSET:
            self._body = json.loads(self._raw_body) if self._raw_body.strip() else None
        return self._body

    def header(self, name: str) -> Optional[str]:
        """Return the first header value matching ``name`` (case-insensitive)."""
        wanted = name.lower()
        for key, value in self._headers:
            if key.lower() == wanted:
                return value
        return None
