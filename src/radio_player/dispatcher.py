"""
Command dispatch for Radio Player.

Maps menu actions, remote-control commands and config reloads onto the
playback coordinator, and raises desktop notifications for remote commands.
Every handler is safe to call repeatedly.
"""

from typing import Callable, Optional

from loguru import logger

from radio_player.domain.playback import NO_SELECTION, Notifier, PlaybackCoordinator
from radio_player.domain.stations import StationConfig, is_selectable, select_next

DEFAULT_NOTIFICATION_TITLE = "Radio"


class CommandDispatcher:
    """Entry point for every external trigger.

    Args:
        coordinator: Playback coordinator owning the selection
        notifier: Desktop notifier for remote-command feedback
        load_stations: Re-reads the station list, None on failure
        launch_editor: Opens the station list for editing; receives the
            completion callback and returns False if the editor did not start
        on_edit_done: Completion callback handed to the editor; defaults to
            reloading directly (the daemon posts a reload to its queue instead)
    """

    def __init__(
        self,
        coordinator: PlaybackCoordinator,
        notifier: Notifier,
        load_stations: Callable[[], Optional[StationConfig]],
        launch_editor: Optional[Callable[[Callable[[], None]], bool]] = None,
        on_edit_done: Optional[Callable[[], None]] = None,
    ):
        self.coordinator = coordinator
        self.notifier = notifier
        self.load_stations = load_stations
        self.launch_editor = launch_editor
        self.on_edit_done = on_edit_done if on_edit_done is not None else self.reload

    # Menu actions

    def toggle(self) -> None:
        """Play/Pause menu item."""
        if self.coordinator.engine.is_playing():
            self.coordinator.pause()
        else:
            self._play_or_advance()

    def next(self) -> None:
        self._step(forward=True)

    def previous(self) -> None:
        self._step(forward=False)

    def select(self, index: int) -> bool:
        """
        Play the station at index, as clicked in the menu.

        Dividers and out-of-range indices are refused without touching
        the current selection.

        Returns:
            True if the station was selected
        """
        stations = self.coordinator.stations
        if index < 0 or index >= len(stations) or not is_selectable(stations[index]):
            logger.warning(f"Ignoring selection of non-station index {index}")
            return False

        self.coordinator.select(index, play=True)
        return True

    def reload(self) -> bool:
        """
        Re-read the station list and clear the selection.

        The selection is cleared even when the reload fails.

        Returns:
            True if a new station list was loaded
        """
        updated = None
        try:
            updated = self.load_stations()
            if updated is not None:
                self.coordinator.replace_config(updated)
                logger.info(f"Reloaded station list: {len(updated.stations)} stations")
            else:
                logger.warning("Station list reload failed, keeping previous stations")
        finally:
            self.coordinator.select(NO_SELECTION, play=False)
        return updated is not None

    def edit(self) -> bool:
        """Open the station list in an editor; reload once it closes."""
        if self.launch_editor is None:
            logger.error("No editor launcher configured")
            return False
        return self.launch_editor(self.on_edit_done)

    # Remote commands (acknowledged regardless of outcome)

    def remote_play(self) -> bool:
        logger.info("remote play")
        self._play_or_advance()
        return True

    def remote_pause(self) -> bool:
        logger.info("remote pause")
        self._notify("Pause")
        self.coordinator.pause()
        return True

    def remote_toggle(self) -> bool:
        logger.info("remote toggle")
        if self.coordinator.engine.is_playing():
            self._notify(f"Pause {self.coordinator.current_title()}")
            self.coordinator.pause()
        else:
            self._play_or_advance()
            self._notify(f"Play {self.coordinator.current_title()}")
        return True

    def remote_next(self) -> bool:
        logger.info("remote next")
        self._step(forward=True)
        self._notify(f"Play {self.coordinator.current_title()}")
        return True

    def remote_previous(self) -> bool:
        logger.info("remote previous")
        self._step(forward=False)
        self._notify(f"Play {self.coordinator.current_title()}")
        return True

    def _play_or_advance(self) -> None:
        if self.coordinator.current < 0:
            self._step(forward=True)
        else:
            self.coordinator.play()

    def _step(self, forward: bool) -> None:
        index = select_next(self.coordinator.current, forward, self.coordinator.stations)
        self.coordinator.select(index, play=True)

    def _notify(self, message: str) -> None:
        title = self.coordinator.title or DEFAULT_NOTIFICATION_TITLE
        self.notifier.notify(title, message)
