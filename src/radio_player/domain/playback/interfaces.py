"""
Collaborator interfaces for the playback coordinator and command dispatcher.

Concrete implementations live next to this module (mpv engine, now-playing
file, SQLite selection store) and in radio_player.notifications; tests pass
in fakes.
"""

from typing import Literal, Protocol

from .now_playing import NowPlayingInfo

PlaybackState = Literal["playing", "paused", "stopped"]


class MediaEngine(Protocol):
    """Streams one URL at a time."""

    def load(self, url: str) -> None:
        """Replace the current item with url, leaving playback paused."""
        ...

    def unload(self) -> None:
        """Detach whatever item is loaded."""
        ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def is_playing(self) -> bool:
        """Report whether the engine is actively playing."""
        ...

    @property
    def rate(self) -> float: ...


class NowPlayingPublisher(Protocol):
    """Publishes current media metadata for the desktop."""

    def publish(self, info: NowPlayingInfo) -> None: ...

    def set_playback_state(self, state: PlaybackState) -> None: ...


class Notifier(Protocol):
    """Shows transient desktop alerts."""

    def notify(self, title: str, message: str) -> None: ...


class SelectionStore(Protocol):
    """Persists the selected station index across restarts."""

    def load(self) -> int: ...

    def save(self, index: int) -> None: ...
