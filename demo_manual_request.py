# demo_manual_request.py
# Version: v1

r"""
Quick smoke test: hit an endpoint without a resource class and page through it.

Run with the virtualenv active and env vars set (TWITTER_ADS_TRACE=1 prints
every request and response):
  python demo_manual_request.py <account_id>
"""

import logging
import sys

from twitter_ads import APIError, Client, Cursor, Request


def main(account_id: str) -> None:
    logging.basicConfig(level=logging.INFO)

    with Client.from_env() as client:
        resource = f"/5/accounts/{account_id}/line_items"
        request = Request(client, "GET", resource, params={"count": 10, "with_deleted": True})

        try:
            for item in Cursor(None, request):
                print(item["id"], item.get("name"), item.get("entity_status"))
        except APIError as exc:
            print(f"HTTP {exc.status_code} code={exc.code!r}: {exc.message}")
            if exc.retry_after:
                print(f"retry after {exc.retry_after}s")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python demo_manual_request.py <account_id>")
        sys.exit(2)
    main(sys.argv[1])
