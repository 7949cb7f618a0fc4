# demo_list_campaigns.py
# Version: v1

r"""
Quick smoke test: list ads accounts and the campaigns of the first one.

Run with the virtualenv active and env vars set:
  export TWITTER_ADS_CONSUMER_KEY=... (plus the other three OAuth values)
  python demo_list_campaigns.py
"""

import logging

from twitter_ads import Client, TwitterAdsError


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    with Client.from_env() as client:
        account = client.accounts().first()
        if account is None:
            print("No ads accounts visible to these credentials.")
            return

        print(f"Account {account.id}: {account.name}")
        for campaign in account.campaigns(count=20):
            status = "deleted" if campaign.deleted else campaign.entity_status
            print(f"  {campaign.id}  {campaign.name}  [{status}]")


if __name__ == "__main__":
    try:
        main()
    except TwitterAdsError as exc:
        print("Ads API call failed:", repr(exc))
