# Twitter Ads API Client
# File: auth.py
# Version: v2

"""OAuth 1.0a request signing for the Ads API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Union

from oauthlib.oauth1 import Client as OAuth1Client

from .config import ClientConfig
from .errors import ConfigurationError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass
class OAuth1Signer:
    """HMAC-SHA1 signer using the app's consumer pair and a user token pair.

    A fresh nonce and timestamp are generated for every call to ``sign``,
    so a signature is only ever good for one request.
    """

    config: ClientConfig

    def _client(self) -> OAuth1Client:
        if not self.config.credentials_complete:
            raise ConfigurationError(
                "OAuth configuration is incomplete. "
                "Set TWITTER_ADS_CONSUMER_KEY, TWITTER_ADS_CONSUMER_SECRET, "
                "TWITTER_ADS_ACCESS_TOKEN and TWITTER_ADS_ACCESS_TOKEN_SECRET."
            )

        return OAuth1Client(
            self.config.consumer_key,
            client_secret=self.config.consumer_secret,
            resource_owner_key=self.config.access_token,
            resource_owner_secret=self.config.access_token_secret,
        )

    def sign(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> Dict[str, str]:
        """Return ``headers`` plus the ``Authorization`` header for this call.

        Only form-encoded bodies take part in the signature base string;
        anything else is signed as if the request had no body.
        """
        headers = dict(headers or {})
        content_type = next(
            (v for k, v in headers.items() if k.lower() == "content-type"), ""
        )
        signed_body = (body or "") if content_type.startswith(FORM_CONTENT_TYPE) else None
        if isinstance(signed_body, bytes):
            signed_body = signed_body.decode("utf-8")

        _, signed_headers, _ = self._client().sign(
            url,
            http_method=method.upper(),
            body=signed_body,
            headers=headers,
        )
        return dict(signed_headers)
