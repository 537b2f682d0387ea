"""
Radio Player - foreground player process.

Starts mpv, restores the last station and serves control-socket commands.
Every trigger (socket commands, editor completion) goes through one queue
drained by the main thread.
"""

import queue
import signal
from pathlib import Path
from typing import Optional

from loguru import logger

from radio_player import router
from radio_player.core import config as core_config
from radio_player.core.output import log, setup_loguru
from radio_player.dispatcher import CommandDispatcher
from radio_player.domain.playback import (
    MpvEngine,
    NowPlayingFile,
    PlaybackCoordinator,
    SQLiteSelectionStore,
    check_mpv_available,
    start_mpv,
)
from radio_player.domain.stations import load_station_config
from radio_player.editor import edit_config
from radio_player.ipc.server import IPCServer
from radio_player.notifications import DesktopNotifier

# Seconds between checks for shutdown while the queue is empty
POLL_INTERVAL = 0.5


def setup_logging(config: core_config.Config) -> Path:
    """Initialize loguru from settings and return the log file path."""
    log_file = (
        Path(config.logging.log_file)
        if config.logging.log_file
        else core_config.get_data_dir() / "radio-player.log"
    )
    setup_loguru(
        log_file,
        level=config.logging.level,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        console_output=config.logging.console_output,
    )
    return log_file


def dispatch_loop(
    dispatcher: CommandDispatcher,
    command_queue: queue.Queue,
    response_queue: Optional[queue.Queue] = None,
) -> None:
    """
    Drain the command queue until a command asks to stop.

    Items are (request_id, command, args). A request_id of None marks an
    internal request that expects no response.
    """
    while True:
        try:
            request_id, command, args = command_queue.get(timeout=POLL_INTERVAL)
        except queue.Empty:
            continue

        should_continue, success, message = router.handle_command(
            dispatcher, command, args
        )
        logger.info(f"[IPC] {command} {' '.join(args)}".strip() + f" → {success}")

        if request_id is not None and response_queue is not None:
            response_queue.put((request_id, success, message))

        if not should_continue:
            return


def run() -> int:
    """Run the player until 'quit', SIGINT or SIGTERM.

    Returns:
        Process exit code
    """
    config = core_config.load_config()
    core_config.ensure_directories()
    log_file = setup_logging(config)

    if not check_mpv_available():
        log("❌ mpv is required: install it and try again", level="error")
        return 1

    player_state = start_mpv(config)
    if player_state is None:
        log(f"❌ Failed to start mpv, see {log_file}", level="error")
        return 1

    engine = MpvEngine(player_state)
    publisher = NowPlayingFile(core_config.get_runtime_dir() / "now-playing.json")
    publisher.set_playback_state("stopped")

    stations_path = core_config.get_stations_path(config)
    coordinator = PlaybackCoordinator(
        engine,
        publisher,
        SQLiteSelectionStore(),
        load_station_config(stations_path),
    )
    coordinator.restore()

    notifier = DesktopNotifier(
        app_name=config.notifications.app_name,
        enabled=config.notifications.enabled,
    )
    notifier.request_authorization()

    command_queue: queue.Queue = queue.Queue()
    response_queue: queue.Queue = queue.Queue()

    dispatcher = CommandDispatcher(
        coordinator,
        notifier,
        load_stations=lambda: load_station_config(stations_path),
        launch_editor=lambda done: (
            edit_config(stations_path, done, config.editor.command) is not None
        ),
        on_edit_done=lambda: command_queue.put((None, "reload", [])),
    )

    server = IPCServer(command_queue, response_queue) if config.ipc.enabled else None
    if server:
        server.start()

    signal.signal(signal.SIGTERM, signal.default_int_handler)

    log(f"📻 {coordinator.title or 'Radio'} ready")
    try:
        dispatch_loop(dispatcher, command_queue, response_queue)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        if server:
            server.stop()
        engine.unload()
        publisher.set_playback_state("stopped")
        engine.shutdown()
        logger.info("Radio Player stopped")

    return 0
