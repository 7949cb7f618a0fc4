# Twitter Ads API Client
# File: client.py
# Version: v5
"""Client context shared by every request.

The client owns the credentials, the sandbox/trace switches, the logger that
tracing writes to and the underlying ``httpx.Client``. It is read-only once
built, so one instance can back any number of Request objects.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from .account import Account
from .auth import OAuth1Signer
from .config import ClientConfig


@dataclass
class Client:
    """Entry point for the Ads API.

    Example::

        client = Client.from_env()
        for account in client.accounts():
            print(account.id, account.name)
    """

    config: ClientConfig
    signer: Optional[OAuth1Signer] = None
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("twitter_ads")
    )

    # Injected by tests (httpx.MockTransport); None means real network I/O.
    transport: Optional[httpx.BaseTransport] = None

    _http: Optional[httpx.Client] = field(default=None, init=False, repr=False)
    _http_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.signer is None:
            self.signer = OAuth1Signer(config=self.config)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        return cls(config=ClientConfig.from_env(), **kwargs)

    # ------------------------------------------------------------------
    # Context exposed to requests
    # ------------------------------------------------------------------

    @property
    def consumer_key(self) -> Optional[str]:
        return self.config.consumer_key

    @property
    def consumer_secret(self) -> Optional[str]:
        return self.config.consumer_secret

    @property
    def access_token(self) -> Optional[str]:
        return self.config.access_token

    @property
    def access_token_secret(self) -> Optional[str]:
        return self.config.access_token_secret

    @property
    def sandbox(self) -> bool:
        return self.config.sandbox

    @property
    def trace(self) -> bool:
        return self.config.trace

    @property
    def http(self) -> httpx.Client:
        """Shared httpx client, built once on first use."""
        with self._http_lock:
            if self._http is None:
                self._http = httpx.Client(
                    timeout=float(self.config.timeout_seconds),
                    verify=self.config.verify_tls,
                    transport=self.transport,
                )
            return self._http

    def close(self) -> None:
        with self._http_lock:
            if self._http is not None:
                self._http.close()
                self._http = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    def accounts(self, id: Optional[str] = None, **opts: Any) -> Any:
        """Load one account by id, or return a Cursor over all of them."""
        return Account.load(self, id, **opts) if id else Account.all(self, **opts)
