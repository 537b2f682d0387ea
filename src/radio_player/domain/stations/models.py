"""
Station list models.

A station list entry is either a playable stream or a divider that only
groups entries visually in the menu.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Playable:
    """A streaming radio station."""

    title: str
    url: str


@dataclass(frozen=True)
class Divider:
    """Non-selectable separator between groups of stations."""

    title: str = field(default="", init=False)
    url: str = field(default="", init=False)


Station = Union[Playable, Divider]


def is_selectable(station: Station) -> bool:
    """Return True if navigation may stop on this entry."""
    return isinstance(station, Playable) and station.title != ""


@dataclass
class StationConfig:
    """Display title plus the ordered station list.

    Reloading updates an existing instance in place so that holders of a
    reference keep seeing the current list.
    """

    title: str
    stations: tuple[Station, ...] = ()

    def update(self, other: "StationConfig") -> None:
        """Replace title and stations with those of another config."""
        self.title = other.title
        self.stations = other.stations
