"""
Station list loading.

The station list is a TOML document:

    title = "My Radio"

    [[station]]
    title = "Jazz FM"
    url = "https://example.com/jazz.mp3"

    [[station]]            # empty title: divider
    title = ""
    url = ""
"""

import tomllib
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from .models import Divider, Playable, Station, StationConfig


DEFAULT_TITLE = "Radio"


class StationConfigError(ValueError):
    """Raised when a station list is structurally invalid."""


def _parse_station(entry: Any, position: int) -> Station:
    if not isinstance(entry, dict):
        raise StationConfigError(f"station #{position + 1} is not a table")

    title = entry.get("title", "")
    if not isinstance(title, str):
        raise StationConfigError(f"station #{position + 1}: title must be a string")

    if title == "":
        return Divider()

    url = entry.get("url")
    if not isinstance(url, str):
        raise StationConfigError(f"station '{title}': missing url")

    return Playable(title=title, url=url.strip())


def parse_station_config(data: dict[str, Any]) -> StationConfig:
    """Build a StationConfig from decoded TOML data.

    Args:
        data: Decoded document with 'title' and a 'station' (or 'stations') array

    Returns:
        Parsed StationConfig

    Raises:
        StationConfigError: If the document shape is invalid
    """
    title = data.get("title", DEFAULT_TITLE)
    if not isinstance(title, str):
        raise StationConfigError("title must be a string")

    entries = data.get("station", data.get("stations", []))
    if not isinstance(entries, list):
        raise StationConfigError("station must be an array of tables")

    stations = tuple(_parse_station(entry, i) for i, entry in enumerate(entries))
    return StationConfig(title=title, stations=stations)


def load_station_config(path: Path) -> Optional[StationConfig]:
    """Load the station list from disk.

    Returns:
        StationConfig, or None if the file is missing or cannot be decoded
    """
    if not path.exists():
        logger.warning(f"Station file not found: {path}")
        return None

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        config = parse_station_config(data)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, StationConfigError) as e:
        logger.error(f"Failed to decode {path}: {e}")
        return None

    logger.info(f"Loaded {len(config.stations)} stations from {path}")
    return config


def create_default_stations() -> str:
    """Sample station list written by 'radio-player init'."""
    return """
# Radio Player stations
# Entries are shown in order. An entry with an empty title is a divider.

title = "Radio"

[[station]]
title = "SomaFM Groove Salad"
url = "https://ice1.somafm.com/groovesalad-128-mp3"

[[station]]
title = "SomaFM Drone Zone"
url = "https://ice1.somafm.com/dronezone-128-mp3"

[[station]]
title = ""
url = ""

[[station]]
title = "Radio Paradise"
url = "https://stream.radioparadise.com/mp3-128"
""".strip()
