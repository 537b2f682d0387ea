"""
Menu model for Radio Player.

Renders the same entries the player menu offers, with the keyboard
shortcuts, so `radio-player menu` shows what each action would do.
"""

from radio_player.domain.playback import PlaybackCoordinator
from radio_player.domain.stations import is_selectable

SEPARATOR = "─" * 28

# Glyphs for the selected station
SELECTED_PLAYING = "▶"
SELECTED_PAUSED = "▷"


def _station_line(coordinator: PlaybackCoordinator, index: int, title: str) -> str:
    if coordinator.is_selected(index):
        glyph = SELECTED_PLAYING if coordinator.is_playing else SELECTED_PAUSED
    else:
        glyph = " "
    return f" {glyph} [{index:>2}] {title}"


def render_menu(coordinator: PlaybackCoordinator) -> list[str]:
    """
    Build the menu as display lines.

    Args:
        coordinator: Playback coordinator to describe

    Returns:
        Lines in menu order: header, transport actions, stations, settings
    """
    header = coordinator.title or "Radio"
    lines = [
        f"{coordinator.indicator} {header}",
        SEPARATOR,
        "   Play/Pause          (P)",
        "   Prev                (B)",
        "   Next                (N)",
        SEPARATOR,
    ]

    for index, station in enumerate(coordinator.stations):
        if is_selectable(station):
            lines.append(_station_line(coordinator, index, station.title))
        else:
            lines.append(SEPARATOR)

    lines.extend(
        [
            SEPARATOR,
            "   Settings...",
            "     Edit configuration",
            "     Reload",
            "   Quit                (Q)",
        ]
    )
    return lines
