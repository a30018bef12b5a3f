"""Base types and enums shared by the model, loaders and algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Type, TypeVar, Union

#: Numeric weight of an edge or a path (e.g. travel time or distance).
Cost = Union[int, float]

_E = TypeVar("_E", bound="_NamedEnum")


class _NamedEnum(IntEnum):
    """IntEnum whose members are written in documents as lower-case names."""

    @classmethod
    def from_string(cls: Type[_E], value: str) -> _E:
        """Parse a case-insensitive member name.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[str(value).upper()]
        except KeyError:
            valid = ", ".join(e.label for e in cls)
            raise ValueError(
                f"Invalid {cls.__name__} '{value}'. Valid values are: {valid}"
            ) from None

    @property
    def label(self) -> str:
        """Lower-case name used in graph documents."""
        return self.name.lower()


class NodeType(_NamedEnum):
    """Safety classification of a location."""

    NORMAL = 1
    SAFE = 2  # designated evacuation or assembly point
    WARNING = 3
    DANGER = 4


class EdgeStatus(_NamedEnum):
    """Whether a road segment can be traversed."""

    OPEN = 1
    BLOCKED = 2


class TrafficLevel(_NamedEnum):
    """Observed congestion on a road segment."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
