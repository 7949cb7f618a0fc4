# Twitter Ads API Client
# File: tests/test_dsl.py
# Version: v1

"""Property tables, hydration and serialization."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from twitter_ads import audiences, campaign, creative, targeting_criteria
from twitter_ads.account import Account
from twitter_ads.resources import (
    DSL,
    PropertyDescriptor,
    PropertyKind,
    declare_property,
    hydrate,
    list_properties,
    resource_property,
    serialize,
)


class Widget(DSL):
    id = resource_property(read_only=True)
    deleted = resource_property(PropertyKind.BOOL, read_only=True)
    created_at = resource_property(PropertyKind.TIME, read_only=True)

    name = resource_property()
    paused = resource_property(PropertyKind.BOOL)
    start_time = resource_property(PropertyKind.TIME)
    placements = resource_property()


def test_hydrate_coerces_declared_kinds() -> None:
    widget = hydrate(
        Widget,
        {"id": "42", "deleted": "true", "created_at": "2019-01-01T00:00:00Z"},
    )

    assert widget.id == "42"
    assert widget.deleted is True
    assert widget.created_at == datetime(2019, 1, 1, tzinfo=timezone.utc)


def test_hydrate_tolerates_partial_objects_and_ignores_unknown_fields() -> None:
    widget = hydrate(Widget, {"id": "7", "surprise": "ignored"})

    assert widget.id == "7"
    assert widget.name is None
    assert widget.created_at is None
    assert not hasattr(widget, "surprise")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("false", False),
        ("TRUE", True),
        (0, False),
        (1, True),
        (True, True),
        (False, False),
        ("maybe", "maybe"),
    ],
)
def test_bool_coercion(raw, expected) -> None:
    widget = hydrate(Widget, {"paused": raw})
    assert widget.paused == expected
    assert type(widget.paused) is type(expected)


def test_time_coercion_falls_back_to_raw_value() -> None:
    assert hydrate(Widget, {"start_time": ""}).start_time == ""
    assert hydrate(Widget, {"start_time": "not a time"}).start_time == "not a time"


def test_list_properties_preserves_declaration_order() -> None:
    names = [p.name for p in list_properties(Widget)]
    assert names == [
        "id",
        "deleted",
        "created_at",
        "name",
        "paused",
        "start_time",
        "placements",
    ]
    assert list_properties(Widget)[1] == PropertyDescriptor(
        "deleted", PropertyKind.BOOL, True
    )


def test_read_only_properties_reject_assignment() -> None:
    widget = Widget()
    with pytest.raises(AttributeError):
        widget.id = "nope"

    widget.name = "writable"
    assert widget.name == "writable"


def test_serialize_formats_values() -> None:
    widget = Widget()
    widget.name = "spring sale"
    widget.paused = False
    widget.start_time = datetime(2019, 1, 1, 12, 30, 15, 999, tzinfo=timezone.utc)
    widget.placements = ["ALL_ON_TWITTER", "PUBLISHER_NETWORK"]

    assert serialize(widget) == {
        "name": "spring sale",
        "paused": False,
        "start_time": "2019-01-01T12:30:15Z",
        "placements": "ALL_ON_TWITTER,PUBLISHER_NETWORK",
    }


def test_serialize_skips_absent_and_empty_values() -> None:
    widget = Widget()
    widget.name = ""
    widget.placements = []
    assert serialize(widget) == {}


def test_writable_properties_round_trip() -> None:
    payload = {
        "name": "evergreen",
        "paused": True,
        "start_time": "2020-05-04T10:00:00Z",
    }
    widget = hydrate(Widget, payload)
    assert serialize(widget) == payload


def test_redeclaring_a_property_overwrites_in_place() -> None:
    class Gadget(DSL):
        id = resource_property()
        flag = resource_property()

    declare_property(Gadget, "id", PropertyKind.PLAIN, read_only=True)

    assert [p.name for p in list_properties(Gadget)] == ["id", "flag"]
    assert list_properties(Gadget)[0].read_only is True
    with pytest.raises(AttributeError):
        Gadget().id = "x"


def test_declare_property_installs_accessor() -> None:
    class Gizmo(DSL):
        pass

    declare_property(Gizmo, "enabled", "bool")
    gizmo = hydrate(Gizmo, {"enabled": "1"})
    assert gizmo.enabled is True
    gizmo.enabled = False
    assert serialize(gizmo) == {"enabled": False}


def test_subclass_inherits_parent_properties() -> None:
    class SpecialWidget(Widget):
        extra = resource_property()

    names = [p.name for p in list_properties(SpecialWidget)]
    assert names[:2] == ["id", "deleted"]
    assert names[-1] == "extra"
    assert "extra" not in [p.name for p in list_properties(Widget)]


def test_repr_shows_id() -> None:
    assert repr(hydrate(Widget, {"id": "42"})) == "<Widget id='42'>"
    assert repr(Widget()) == "<Widget>"


RESOURCE_TYPES = [
    Account,
    audiences.TailoredAudience,
    campaign.Campaign,
    campaign.FundingInstrument,
    campaign.LineItem,
    campaign.PromotableUser,
    campaign.TargetingCriteria,
    creative.AppDownloadCard,
    creative.ImageAppDownloadCard,
    creative.LeadGenCard,
    creative.MediaCreative,
    creative.PromotedAccount,
    creative.PromotedTweet,
    creative.VideoAppDownloadCard,
    targeting_criteria.AppStoreCategory,
    targeting_criteria.Device,
    targeting_criteria.NetworkOperator,
    targeting_criteria.PlatformVersion,
    targeting_criteria.TVChannel,
]


@pytest.mark.parametrize("resource_type", RESOURCE_TYPES, ids=lambda t: t.__name__)
def test_every_resource_exposes_its_declared_properties(resource_type) -> None:
    descriptors = list_properties(resource_type)
    names = [d.name for d in descriptors]

    assert "id" in names
    assert len(names) == len(set(names))

    instance = resource_type(None)
    instance.from_response({d.name: f"value-{d.name}" for d in descriptors})

    for descriptor in descriptors:
        if descriptor.kind is PropertyKind.PLAIN:
            assert getattr(instance, descriptor.name) == f"value-{descriptor.name}"
        if descriptor.read_only:
            with pytest.raises(AttributeError):
                setattr(instance, descriptor.name, "changed")
        else:
            setattr(instance, descriptor.name, "changed")
            assert getattr(instance, descriptor.name) == "changed"


def test_serialize_can_leave_out_read_only_properties() -> None:
    widget = hydrate(Widget, {"id": "42", "deleted": "false", "name": "kept"})

    assert serialize(widget) == {"id": "42", "deleted": False, "name": "kept"}
    assert widget.to_params(writable_only=True) == {"name": "kept"}
