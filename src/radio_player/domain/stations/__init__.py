"""Stations domain - station list model, loading and navigation."""

from .models import Divider, Playable, Station, StationConfig, is_selectable
from .loader import (
    StationConfigError,
    create_default_stations,
    load_station_config,
    parse_station_config,
)
from .navigation import select_next

__all__ = [
    # Models
    "Station",
    "Playable",
    "Divider",
    "StationConfig",
    "is_selectable",
    # Loading
    "StationConfigError",
    "parse_station_config",
    "load_station_config",
    "create_default_stations",
    # Navigation
    "select_next",
]
