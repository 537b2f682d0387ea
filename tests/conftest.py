"""Shared fakes and fixtures for Radio Player tests."""

import pytest

from radio_player.dispatcher import CommandDispatcher
from radio_player.domain.playback import PlaybackCoordinator
from radio_player.domain.stations import Divider, Playable, StationConfig


class FakeEngine:
    """Media engine that records calls and tracks play state."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.loaded: str | None = None
        self.playing = False

    def load(self, url: str) -> None:
        self.calls.append(("load", url))
        self.loaded = url
        self.playing = False

    def unload(self) -> None:
        self.calls.append(("unload",))
        self.loaded = None
        self.playing = False

    def play(self) -> None:
        self.calls.append(("play",))
        self.playing = self.loaded is not None

    def pause(self) -> None:
        self.calls.append(("pause",))
        self.playing = False

    def is_playing(self) -> bool:
        return self.playing

    @property
    def rate(self) -> float:
        return 1.0 if self.playing else 0.0


class FakePublisher:
    def __init__(self):
        self.published = []
        self.states: list[str] = []

    def publish(self, info) -> None:
        self.published.append(info)

    def set_playback_state(self, state: str) -> None:
        self.states.append(state)


class FakeNotifier:
    def __init__(self):
        self.notifications: list[tuple[str, str]] = []

    def notify(self, title: str, message: str) -> None:
        self.notifications.append((title, message))


class MemoryStore:
    def __init__(self, index: int = -1):
        self.index = index
        self.saved: list[int] = []

    def load(self) -> int:
        return self.index

    def save(self, index: int) -> None:
        self.index = index
        self.saved.append(index)


@pytest.fixture
def stations() -> StationConfig:
    """Playlist with a divider between A and B."""
    return StationConfig(
        title="My Radio",
        stations=(
            Playable("A", "http://a.example/stream"),
            Divider(),
            Playable("B", "http://b.example/stream"),
        ),
    )


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def coordinator(engine, publisher, store, stations) -> PlaybackCoordinator:
    return PlaybackCoordinator(engine, publisher, store, stations)


@pytest.fixture
def dispatcher(coordinator, notifier) -> CommandDispatcher:
    reloaded = StationConfig(
        title="Reloaded",
        stations=(Playable("C", "http://c.example/stream"), Playable("D", "http://d.example/stream")),
    )
    return CommandDispatcher(coordinator, notifier, load_stations=lambda: reloaded)
