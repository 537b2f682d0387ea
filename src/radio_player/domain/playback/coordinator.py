"""
Playback coordination for Radio Player.

Owns the selected station index and the play/pause flag, and keeps the media
engine and the now-playing publisher in step with them.
"""

from typing import Optional

from loguru import logger

from radio_player.domain.stations import Station, StationConfig

from .interfaces import MediaEngine, NowPlayingPublisher, SelectionStore
from .now_playing import NowPlayingInfo

NO_SELECTION = -1

PLAYING_INDICATOR = "▶"
PAUSED_INDICATOR = "⏸"


class PlaybackCoordinator:
    """Selection state plus the transitions between stations.

    Not thread-safe: all calls must come from the dispatch loop.
    """

    def __init__(
        self,
        engine: MediaEngine,
        publisher: NowPlayingPublisher,
        store: SelectionStore,
        config: Optional[StationConfig] = None,
    ):
        self.engine = engine
        self.publisher = publisher
        self.store = store
        self.config = config
        self.current = store.load()
        self.is_playing = False
        self.indicator = PAUSED_INDICATOR

    @property
    def stations(self) -> tuple[Station, ...]:
        return self.config.stations if self.config is not None else ()

    @property
    def title(self) -> str:
        return self.config.title if self.config is not None else ""

    def restore(self) -> None:
        """Re-validate the persisted selection against the loaded stations."""
        logger.info(f"Restoring station selection: index={self.current}")
        self.select(self.current, play=False)

    def replace_config(self, config: StationConfig) -> None:
        """Swap in a freshly loaded station list, keeping the config object."""
        if self.config is None:
            self.config = config
        else:
            self.config.update(config)

    def select(self, index: int, play: bool) -> None:
        """
        Make index the current station and load its stream.

        An index outside the station list, or an entry without a URL,
        clears the selection and stops playback.

        Args:
            index: Station index, -1 to clear
            play: Start playback right away
        """
        stations = self.stations
        if index < 0 or index >= len(stations) or not stations[index].url:
            self.engine.unload()
            self.pause()
            self._set_current(NO_SELECTION)
            return

        station = stations[index]
        self._set_current(index)

        self._publish(station)
        self.engine.load(station.url)
        logger.info(f"Selected station {index}: {station.title}")

        if play:
            self.play()

    def play(self) -> None:
        self.engine.play()
        self.is_playing = True
        self.indicator = PLAYING_INDICATOR
        self.publisher.set_playback_state("playing")

    def pause(self) -> None:
        self.engine.pause()
        self.is_playing = False
        self.indicator = PAUSED_INDICATOR
        self.publisher.set_playback_state("paused")

    def current_title(self) -> str:
        """Title of the selected station, or "" when nothing valid is selected."""
        stations = self.stations
        if self.current < 0 or self.current >= len(stations):
            return ""
        return stations[self.current].title

    def is_selected(self, index: int) -> bool:
        return self.current == index

    def _set_current(self, index: int) -> None:
        self.current = index
        self.store.save(index)

    def _publish(self, station: Station) -> None:
        self.publisher.publish(
            NowPlayingInfo(
                title=station.title,
                asset_url=station.url,
                playback_rate=self.engine.rate,
            )
        )
