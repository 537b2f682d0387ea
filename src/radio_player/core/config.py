"""
Configuration management for Radio Player
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger


@dataclass
class PlayerConfig:
    """Configuration for the mpv media engine."""

    mpv_socket_path: Optional[str] = None
    volume: int = 70


@dataclass
class StationsConfig:
    """Location of the station list."""

    file: Optional[str] = None  # Default: <config dir>/radio.toml


@dataclass
class EditorConfig:
    """Editor used by the 'edit' action."""

    command: Optional[str] = None  # Falls back to $VISUAL / $EDITOR


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/radio-player/radio-player.log)
    )
    rotation: str = "5 MB"
    retention: int = 3
    console_output: bool = False  # Also log to stderr (for debugging)


@dataclass
class NotificationsConfig:
    """Configuration for desktop notifications."""

    enabled: bool = True
    app_name: str = "Radio Player"


@dataclass
class IPCConfig:
    """Configuration for the control socket."""

    enabled: bool = True


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    stations: StationsConfig = field(default_factory=StationsConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    ipc: IPCConfig = field(default_factory=IPCConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "radio-player"
    return Path.home() / ".config" / "radio-player"


def get_config_path() -> Path:
    """Get the settings file path."""
    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "radio-player"
    return Path.home() / ".local" / "share" / "radio-player"


def get_runtime_dir() -> Path:
    """Get the directory for sockets and other per-session files.

    Uses XDG_RUNTIME_DIR when available, otherwise the data directory.
    """
    runtime_dir = os.environ.get("XDG_RUNTIME_DIR")
    if runtime_dir:
        return Path(runtime_dir) / "radio-player"
    return get_data_dir()


def get_stations_path(config: Config) -> Path:
    """Resolve the station list path from settings."""
    if config.stations.file:
        return Path(config.stations.file).expanduser()
    return get_config_dir() / "radio.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Radio Player Configuration

[player]
# Path for mpv socket (auto-detected if not specified)
# mpv_socket_path = "/tmp/radio-player-mpv"

# Default volume (0-100)
volume = 70

[stations]
# Station list (default: radio.toml next to this file)
# file = "~/.config/radio-player/radio.toml"

[editor]
# Command used by 'radio-player edit' (default: $VISUAL, then $EDITOR).
# The player has no terminal, so use a GUI editor that stays in the
# foreground until the window closes. Terminal editors (vim, nano...)
# in $VISUAL/$EDITOR are skipped.
# command = "gedit --wait"

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/radio-player/radio-player.log)
# log_file = "/path/to/radio-player.log"

# Rotate the log file at this size
rotation = "5 MB"

# Number of rotated log files to keep
retention = 3

# Also output logs to stderr (useful for debugging)
console_output = false

[notifications]
# Show a desktop notification on remote play/pause/next/prev
enabled = true
app_name = "Radio Player"

[ipc]
# Accept commands on the control socket
enabled = true
""".strip()


def load_config() -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - RADIO_PLAYER_STATIONS
    - RADIO_PLAYER_EDITOR
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            logger.info(f"Created default configuration at: {config_path}")
        except OSError as e:
            logger.warning(f"Could not write default configuration {config_path}: {e}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = _parse_config(toml_data)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        return _apply_env_overrides(Config())
    except (AttributeError, TypeError, ValueError) as e:
        logger.error(f"Invalid value in configuration {config_path}: {e}")
        logger.warning("Using default configuration.")
        return _apply_env_overrides(Config())

    return _apply_env_overrides(config)


def _section(toml_data: dict, name: str) -> Optional[dict]:
    """Return a settings table, or None if absent or not a table."""
    if name not in toml_data:
        return None
    section = toml_data[name]
    if not isinstance(section, dict):
        logger.warning(f"Ignoring [{name}]: expected a table")
        return None
    return section


def _parse_config(toml_data: dict) -> Config:
    config = Config()

    player_data = _section(toml_data, "player")
    if player_data is not None:
        config.player = PlayerConfig(
            mpv_socket_path=player_data.get("mpv_socket_path"),
            volume=int(player_data.get("volume", config.player.volume)),
        )

    stations_data = _section(toml_data, "stations")
    if stations_data is not None:
        config.stations = StationsConfig(file=stations_data.get("file"))

    editor_data = _section(toml_data, "editor")
    if editor_data is not None:
        config.editor = EditorConfig(command=editor_data.get("command"))

    logging_data = _section(toml_data, "logging")
    if logging_data is not None:
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        level = logging_data.get("level", config.logging.level)
        if not isinstance(level, str):
            raise TypeError(f"logging level must be a string, got {level!r}")
        config.logging = LoggingConfig(
            level=level.upper(),
            log_file=log_file,
            rotation=logging_data.get("rotation", config.logging.rotation),
            retention=logging_data.get("retention", config.logging.retention),
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    notifications_data = _section(toml_data, "notifications")
    if notifications_data is not None:
        config.notifications = NotificationsConfig(
            enabled=notifications_data.get("enabled", config.notifications.enabled),
            app_name=notifications_data.get(
                "app_name", config.notifications.app_name
            ),
        )

    ipc_data = _section(toml_data, "ipc")
    if ipc_data is not None:
        config.ipc = IPCConfig(enabled=ipc_data.get("enabled", config.ipc.enabled))

    return config


def _apply_env_overrides(config: Config) -> Config:
    stations_file = os.environ.get("RADIO_PLAYER_STATIONS")
    editor_command = os.environ.get("RADIO_PLAYER_EDITOR")

    if stations_file:
        config.stations.file = stations_file
    if editor_command:
        config.editor.command = editor_command

    return config


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
    get_runtime_dir().mkdir(parents=True, exist_ok=True)
