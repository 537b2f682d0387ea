"""Playback domain - mpv integration, selection state and coordination.

This domain handles:
- MPV player integration via JSON IPC
- Now-playing metadata publishing
- Persisted station selection
- Station transitions and the play/pause flag
"""

from .coordinator import (
    NO_SELECTION,
    PAUSED_INDICATOR,
    PLAYING_INDICATOR,
    PlaybackCoordinator,
)
from .interfaces import (
    MediaEngine,
    Notifier,
    NowPlayingPublisher,
    PlaybackState,
    SelectionStore,
)
from .now_playing import NowPlayingFile, NowPlayingInfo
from .player import (
    MpvEngine,
    PlayerState,
    check_mpv_available,
    get_mpv_property,
    is_mpv_running,
    send_mpv_command,
    start_mpv,
    stop_mpv,
)
from .state import SQLiteSelectionStore

__all__ = [
    # Coordinator
    "PlaybackCoordinator",
    "NO_SELECTION",
    "PLAYING_INDICATOR",
    "PAUSED_INDICATOR",
    # Interfaces
    "MediaEngine",
    "NowPlayingPublisher",
    "Notifier",
    "SelectionStore",
    "PlaybackState",
    # Now playing
    "NowPlayingInfo",
    "NowPlayingFile",
    # Player
    "PlayerState",
    "MpvEngine",
    "check_mpv_available",
    "start_mpv",
    "stop_mpv",
    "is_mpv_running",
    "send_mpv_command",
    "get_mpv_property",
    # State
    "SQLiteSelectionStore",
]
