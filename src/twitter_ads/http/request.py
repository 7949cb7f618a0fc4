# Twitter Ads API Client
# File: http/request.py
# Version: v4

"""Signed, single-shot HTTP requests against the Ads API."""

from __future__ import annotations

import logging
import platform
import sys
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

import httpx
from httpx import RequestError

from ..config import DEFAULT_DOMAIN, SANDBOX_DOMAIN
from ..errors import TransportError, classify
from ..utils import encode_params
from ..version import __version__
from .response import Response

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")

OMITTED_BODY = "**OMITTED**"


def user_agent() -> str:
    return (
        f"twitter-ads version: {__version__} "
        f"platform: {platform.python_implementation()} "
        f"{platform.python_version()} ({sys.platform})"
    )


class Request:
    """One Ads API call.

    Example::

        request = Request(client, "GET", "/5/accounts", params={"with_deleted": True})
        response = request.perform()

    ``resource`` is the path with any ``{placeholder}`` already filled in.
    ``domain`` overrides the production/sandbox choice made from the client
    (used for the upload host, for instance).

    A Request never changes after construction; ``with_params`` builds a new
    one. ``perform`` does not retry: a 4xx/5xx is raised as the classified
    APIError, a network failure as TransportError.
    """

    def __init__(
        self,
        client: "Client",
        method: str,
        resource: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Union[str, bytes]] = None,
        headers: Optional[Mapping[str, str]] = None,
        domain: Optional[str] = None,
    ) -> None:
        method = str(method).upper()
        if method not in HTTP_METHODS:
            raise ValueError(
                f"Unsupported HTTP method {method!r}; expected one of {HTTP_METHODS}"
            )

        self._client = client
        self._method = method
        self._resource = resource
        self._params: Dict[str, Any] = dict(params or {})
        self._body = body
        self._headers: Dict[str, str] = dict(headers or {})
        self._domain_override = domain

    def __repr__(self) -> str:
        return f"<Request {self._method} {self.domain}{self._resource}>"

    @property
    def client(self) -> "Client":
        return self._client

    @property
    def method(self) -> str:
        return self._method

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    @property
    def body(self) -> Optional[Union[str, bytes]]:
        return self._body

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def domain(self) -> str:
        if self._domain_override:
            return self._domain_override.rstrip("/")
        return SANDBOX_DOMAIN if self._client.sandbox else DEFAULT_DOMAIN

    @property
    def url(self) -> str:
        url = f"{self.domain}{self._resource}"
        query = encode_params(self._params)
        if query:
            url = f"{url}?{query}"
        return url

    def with_params(self, **params: Any) -> "Request":
        """Copy of this request with ``params`` merged over the current ones."""
        merged = dict(self._params)
        merged.update(params)
        return Request(
            self._client,
            self._method,
            self._resource,
            params=merged,
            body=self._body,
            headers=self._headers,
            domain=self._domain_override,
        )

    def perform(self) -> Response:
        """Execute the request and return the Response, raising on status >= 400."""
        url = self.url

        headers = dict(self._headers)
        headers["User-Agent"] = user_agent()
        headers = self._client.signer.sign(self._method, url, headers, self._body)

        if self._client.trace:
            self._log(self._log_request)

        try:
            http_response = self._client.http.request(
                self._method,
                url,
                headers=headers,
                content=self._body,
            )
        except RequestError as exc:
            raise TransportError(
                f"Error calling Ads API {self._method} {url}: {exc}"
            ) from exc

        response = _wrap(http_response)

        if self._client.trace:
            self._log(self._log_response, response)

        if response.status_code >= 400:
            raise classify(response)
        return response

    # ------------------------------------------------------------------
    # Tracing
    # ------------------------------------------------------------------

    def _log(self, writer: Any, *args: Any) -> None:
        try:
            writer(*args)
        except Exception:  # noqa: BLE001
            logger.debug("Failed to write trace log for %r", self, exc_info=True)

    def _log_request(self) -> None:
        self._client.logger.info(
            "Send: %s %s%s %s",
            self._method,
            self.domain,
            self._resource,
            self._params,
        )

    def _log_response(self, response: Response) -> None:
        sink = self._client.logger
        sink.info("Status: %s", response.status_code)
        for name, value in response.headers:
            sink.info("Header: %s: %s", name, value)

        if not response.raw_body:
            return

        # upload hosts carry user data; only the Ads API hosts are echoed
        if self.domain in (DEFAULT_DOMAIN, SANDBOX_DOMAIN):
            sink.info("Body: %s", response.raw_body)
        else:
            sink.info("Body: %s", OMITTED_BODY)


def _wrap(http_response: httpx.Response) -> Response:
    return Response(
        http_response.status_code,
        http_response.headers.multi_items(),
        http_response.text,
    )
