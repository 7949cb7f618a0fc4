# Twitter Ads API Client
# File: resources/dsl.py
# Version: v3

"""Declarative property tables for Ads API resources.

Each resource type carries an ordered table of property descriptors
``(name, kind, read_only)``. The table drives both directions of the
JSON mapping:

- :func:`hydrate` / ``DSL.from_response`` read each declared field from a
  decoded API object, coercing ``time`` and ``bool`` kinds;
- :func:`serialize` / ``DSL.to_params`` turn the current values back into a
  flat params mapping for form/query encoding.

Properties are usually declared in the class body::

    class Campaign(Resource):
        id = resource_property(read_only=True)
        paused = resource_property(PropertyKind.BOOL)
        start_time = resource_property(PropertyKind.TIME)

which is equivalent to calling ``declare_property(Campaign, "paused",
PropertyKind.BOOL)`` after the class is defined.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from ..utils import format_time, parse_time, to_bool

T = TypeVar("T", bound="DSL")

_TABLE_ATTR = "_property_table"


class PropertyKind(str, Enum):
    PLAIN = "plain"
    TIME = "time"
    BOOL = "bool"


@dataclass(frozen=True)
class PropertyDescriptor:
    name: str
    kind: PropertyKind = PropertyKind.PLAIN
    read_only: bool = False


class resource_property:
    """Class-body declaration of one resource property.

    Reading returns the current value (None when never set). Assigning to a
    read-only property raises AttributeError; hydration bypasses that.
    """

    def __init__(
        self,
        kind: Union[PropertyKind, str] = PropertyKind.PLAIN,
        read_only: bool = False,
    ) -> None:
        self.kind = PropertyKind(kind)
        self.read_only = bool(read_only)
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        declare_property(owner, name, self.kind, self.read_only)

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        if self.read_only:
            raise AttributeError(
                f"{type(instance).__name__}.{self.name} is a read-only property"
            )
        instance._values[self.name] = value

    @property
    def descriptor(self) -> PropertyDescriptor:
        return PropertyDescriptor(str(self.name), self.kind, self.read_only)


def declare_property(
    resource_type: type,
    name: str,
    kind: Union[PropertyKind, str] = PropertyKind.PLAIN,
    read_only: bool = False,
) -> PropertyDescriptor:
    """Register ``name`` in the property table of ``resource_type``.

    Declaring a name twice replaces the earlier descriptor in place.
    """
    descriptor = PropertyDescriptor(name, PropertyKind(kind), bool(read_only))

    table: Optional[Dict[str, PropertyDescriptor]] = resource_type.__dict__.get(_TABLE_ATTR)
    if table is None:
        table = {}
        setattr(resource_type, _TABLE_ATTR, table)
    table[name] = descriptor

    accessor = resource_type.__dict__.get(name)
    if not isinstance(accessor, resource_property) or accessor.descriptor != descriptor:
        accessor = resource_property(descriptor.kind, descriptor.read_only)
        accessor.name = name
        setattr(resource_type, name, accessor)

    return descriptor


def list_properties(resource_type: type) -> List[PropertyDescriptor]:
    """Ordered descriptors of ``resource_type``, inherited ones first."""
    merged: Dict[str, PropertyDescriptor] = {}
    for klass in reversed(resource_type.__mro__):
        merged.update(klass.__dict__.get(_TABLE_ATTR) or {})
    return list(merged.values())


def _coerce(descriptor: PropertyDescriptor, obj: Mapping[str, Any]) -> Any:
    raw = obj.get(descriptor.name)
    if raw is None:
        return None

    value: Any = None
    if descriptor.kind is PropertyKind.TIME:
        value = parse_time(raw)
    elif descriptor.kind is PropertyKind.BOOL:
        value = to_bool(raw)

    return raw if value is None else value


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _format(descriptor: PropertyDescriptor, value: Any) -> Any:
    if descriptor.kind is PropertyKind.TIME and isinstance(value, datetime):
        return format_time(value)
    if descriptor.kind is PropertyKind.BOOL:
        coerced = to_bool(value)
        return bool(value) if coerced is None else coerced
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(item) for item in value)
    return value


class DSL:
    """Base for anything described by a property table."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def __repr__(self) -> str:
        ident = self._values.get("id")
        suffix = f" id={ident!r}" if ident is not None else ""
        return f"<{type(self).__name__}{suffix}>"

    @classmethod
    def properties(cls) -> List[PropertyDescriptor]:
        return list_properties(cls)

    def from_response(self: T, obj: Optional[Mapping[str, Any]]) -> T:
        """Populate every declared property from a decoded API object.

        Fields the object lacks become None; unknown fields are ignored.
        """
        obj = obj or {}
        for descriptor in list_properties(type(self)):
            self._values[descriptor.name] = _coerce(descriptor, obj)
        return self

    def to_params(self, writable_only: bool = False) -> Dict[str, Any]:
        """Flat params for the declared properties that currently hold a value.

        With ``writable_only`` read-only properties are left out.
        """
        params: Dict[str, Any] = {}
        for descriptor in list_properties(type(self)):
            if writable_only and descriptor.read_only:
                continue
            value = self._values.get(descriptor.name)
            if _is_empty(value):
                continue
            params[descriptor.name] = _format(descriptor, value)
        return params


def hydrate(resource_type: Type[T], obj: Optional[Mapping[str, Any]], *init_args: Any) -> T:
    """Build a ``resource_type`` instance from a decoded API object."""
    return resource_type(*init_args).from_response(obj)


def serialize(instance: DSL) -> Dict[str, Any]:
    """Params mapping for ``instance`` (see ``DSL.to_params``)."""
    return instance.to_params()
