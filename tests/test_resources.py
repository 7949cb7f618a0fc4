# Twitter Ads API Client
# File: tests/test_resources.py
# Version: v1

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from twitter_ads import Account, Campaign, LineItem, TailoredAudience
from twitter_ads.audiences import tailored_audience
from twitter_ads.creative import PromotedTweet
from twitter_ads.cursor import Cursor
from twitter_ads.enum import Granularity, MetricGroup, TAListTypes, values
from twitter_ads.errors import BadRequest, NotLoadedError
from twitter_ads.targeting_criteria import Device


def test_client_loads_one_account(api, client) -> None:
    api.add(body={"data": {"id": "abc1", "name": "Acme", "deleted": False}})

    account = client.accounts("abc1")

    assert isinstance(account, Account)
    assert account.client is client
    assert account.name == "Acme"
    assert account.deleted is False
    assert api.requests[0].url.path == "/5/accounts/abc1"


def test_client_lists_accounts(api, client) -> None:
    api.add(body={"data": [{"id": "a"}, {"id": "b"}]})

    accounts = client.accounts(with_deleted=True)

    assert isinstance(accounts, Cursor)
    assert [a.id for a in accounts] == ["a", "b"]
    assert api.params() == {"with_deleted": "true"}


def test_account_features(api, account) -> None:
    api.add(body={"data": ["AGE_TARGETING"]})
    assert account.features() == ["AGE_TARGETING"]
    assert api.requests[0].url.path == "/5/accounts/abc1/features"


def test_unloaded_account_refuses_collection_calls(api, client) -> None:
    with pytest.raises(NotLoadedError):
        Account(client).campaigns()
    assert api.requests == []


def test_account_loads_campaign_with_deleted_by_default(api, account) -> None:
    api.add(body={"data": {"id": "c1", "name": "Spring", "start_time": "2019-03-01T00:00:00Z"}})

    campaign = account.campaigns("c1")

    assert isinstance(campaign, Campaign)
    assert campaign.start_time == datetime(2019, 3, 1, tzinfo=timezone.utc)
    assert api.requests[0].url.path == "/5/accounts/abc1/campaigns/c1"
    assert api.params() == {"with_deleted": "true"}


def test_save_creates_then_updates(api, account) -> None:
    campaign = Campaign(account)
    campaign.name = "Spring"
    campaign.funding_instrument_id = "fi1"
    campaign.standard_delivery = False
    campaign.start_time = datetime(2019, 3, 1, 8, tzinfo=timezone.utc)

    api.add(body={"data": {"id": "c1", "name": "Spring", "funding_instrument_id": "fi1"}})
    campaign.save()

    created = api.requests[0]
    assert created.method == "POST"
    assert created.url.path == "/5/accounts/abc1/campaigns"
    assert api.params() == {
        "name": "Spring",
        "funding_instrument_id": "fi1",
        "start_time": "2019-03-01T08:00:00Z",
        "standard_delivery": "false",
    }
    assert campaign.id == "c1"

    campaign.name = "Summer"
    api.add(body={"data": {"id": "c1", "name": "Summer", "funding_instrument_id": "fi1"}})
    campaign.save()

    updated = api.requests[1]
    assert updated.method == "PUT"
    assert updated.url.path == "/5/accounts/abc1/campaigns/c1"
    assert api.params()["name"] == "Summer"
    assert campaign.name == "Summer"


def test_delete_marks_the_object_deleted(api, account) -> None:
    campaign = Campaign(account).from_response({"id": "c1"})
    api.add(body={"data": {"id": "c1", "deleted": True}})

    campaign.delete()

    assert api.requests[0].method == "DELETE"
    assert api.requests[0].url.path == "/5/accounts/abc1/campaigns/c1"
    assert campaign.deleted is True


def test_unsaved_objects_cannot_be_deleted_or_reloaded(api, account) -> None:
    with pytest.raises(NotLoadedError):
        Campaign(account).delete()
    with pytest.raises(NotLoadedError):
        PromotedTweet(account).reload()
    assert api.requests == []


def test_all_stats_builds_the_stats_query(api, account) -> None:
    api.add(body={"data": [{"id": "l1", "id_data": []}]})

    data = LineItem.all_stats(
        account,
        ["l1", "l2"],
        [MetricGroup.ENGAGEMENT, MetricGroup.BILLING],
        start_time=datetime(2019, 1, 1, 10, 35, tzinfo=timezone.utc),
        end_time=datetime(2019, 1, 8, 22, 5, tzinfo=timezone.utc),
        granularity=Granularity.DAY,
    )

    assert data == [{"id": "l1", "id_data": []}]
    assert api.requests[0].url.path == "/5/stats/accounts/abc1"
    assert api.params() == {
        "metric_groups": "ENGAGEMENT,BILLING",
        "start_time": "2019-01-01T00:00:00Z",
        "end_time": "2019-01-08T00:00:00Z",
        "granularity": "DAY",
        "entity": "LINE_ITEM",
        "placement": "ALL_ON_TWITTER",
        "entity_ids": "l1,l2",
    }


def test_instance_stats_uses_its_own_id(api, account) -> None:
    tweet = PromotedTweet(account).from_response({"id": "pt1"})
    api.add(body={"data": []})

    tweet.stats([MetricGroup.ENGAGEMENT], granularity=Granularity.HOUR)

    params = api.params()
    assert params["entity"] == "PROMOTED_TWEET"
    assert params["entity_ids"] == "pt1"
    assert params["granularity"] == "HOUR"


def test_valid_placements(api, client) -> None:
    api.add(body={"data": [{"product_type": "PROMOTED_TWEETS", "placements": [["ALL_ON_TWITTER"]]}]})

    placements = LineItem.valid_placements(client, product_type="PROMOTED_TWEETS")

    assert placements[0]["product_type"] == "PROMOTED_TWEETS"
    assert api.requests[0].url.path == "/5/line_items/placements"
    assert api.params() == {"product_type": "PROMOTED_TWEETS"}


def test_line_item_targeting_criteria(api, account) -> None:
    line_item = LineItem(account).from_response({"id": "l1"})
    api.add(body={"data": [{"id": "tc1", "line_item_id": "l1", "targeting_type": "LOCATION"}]})

    criteria = line_item.targeting_criteria().to_list()

    assert [c.targeting_type for c in criteria] == ["LOCATION"]
    assert api.requests[0].url.path == "/5/accounts/abc1/targeting_criteria"
    assert api.params() == {"line_item_ids": "l1"}


def test_tailored_audience_status_filters_changes(api, account) -> None:
    audience = TailoredAudience(account).from_response({"id": "ta1", "name": "VIPs"})
    api.add(
        body={
            "data": [
                {"tailored_audience_id": "ta1", "state": "COMPLETED"},
                {"tailored_audience_id": "ta2", "state": "PROCESSING"},
            ],
            "next_cursor": None,
        }
    )

    changes = audience.status()

    assert changes == [{"tailored_audience_id": "ta1", "state": "COMPLETED"}]
    assert api.requests[0].url.path == "/5/accounts/abc1/tailored_audience_changes"


def test_tailored_audience_status_requires_id(account) -> None:
    with pytest.raises(NotLoadedError):
        TailoredAudience(account).status()


def test_tailored_audience_create_cleans_up_on_failure(api, account) -> None:
    api.add(body={"data": {"id": "ta1", "name": "VIPs", "list_type": "EMAIL"}})
    api.add(status=400, body={"errors": [{"code": "INVALID_PARAMETER", "message": "bad file"}]})
    api.add(body={"data": {"id": "ta1", "deleted": True}})

    with pytest.raises(BadRequest):
        TailoredAudience.create(account, "/ta_upload/file.txt", "VIPs", TAListTypes.EMAIL)

    assert [r.method for r in api.requests] == ["POST", "POST", "DELETE"]
    assert api.requests[2].url.path == "/5/accounts/abc1/tailored_audiences/ta1"


def test_tailored_audience_rejects_unknown_list_type(api, account) -> None:
    with pytest.raises(ValueError):
        TailoredAudience.create(account, "/ta_upload/file.txt", "VIPs", "FAX_NUMBER")
    assert api.requests == []


def test_targeting_lookups_are_account_independent(api, account) -> None:
    api.add(body={"data": [{"name": "iPhone", "targeting_value": "1", "platform": "iOS"}]})

    devices = Device.all(account, q="iphone").to_list()

    assert devices[0].platform == "iOS"
    assert api.requests[0].url.path == "/5/targeting_criteria/devices"
    assert api.params() == {"q": "iphone"}


def test_update_sends_only_writable_properties(api, account) -> None:
    campaign = Campaign(account).from_response(
        {
            "id": "c1",
            "name": "Spring",
            "servable": False,
            "deleted": False,
            "created_at": "2019-01-01T00:00:00Z",
        }
    )
    campaign.name = "Summer"
    api.add(body={"data": {"id": "c1", "name": "Summer"}})

    campaign.save()

    assert api.requests[0].method == "PUT"
    assert api.params() == {"id": "c1", "name": "Summer"}


def test_tailored_audience_choices_follow_the_enum_groups(api, account) -> None:
    assert tailored_audience.LIST_TYPES == values(TAListTypes)
    assert TAListTypes.PHONE_NUMBER in tailored_audience.LIST_TYPES
    assert tailored_audience.OPERATIONS == ("ADD", "REMOVE", "REPLACE")

    audience = TailoredAudience(account).from_response({"id": "ta1"})
    with pytest.raises(ValueError):
        audience.update("/ta_upload/file.txt", TAListTypes.EMAIL, operation="MERGE")
    assert api.requests == []
