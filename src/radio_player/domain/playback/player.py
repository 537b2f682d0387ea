"""
MPV player integration with JSON IPC for Radio Player
"""

import json
import os
import socket
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any, NamedTuple, Optional

from loguru import logger

from radio_player.core.config import Config


class PlayerState(NamedTuple):
    """Immutable mpv process handle."""

    socket_path: Optional[str] = None
    process: Optional[subprocess.Popen] = None


def check_mpv_available() -> bool:
    """Check if MPV is available on the system."""
    try:
        result = subprocess.run(
            ["mpv", "--version"], capture_output=True, text=True, timeout=5
        )
        return result.returncode == 0
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return False


def start_mpv(config: Config) -> Optional[PlayerState]:
    """Start MPV with JSON IPC and return initial state."""
    if config.player.mpv_socket_path:
        socket_path = config.player.mpv_socket_path
    else:
        temp_dir = Path(tempfile.gettempdir())
        socket_path = str(temp_dir / f"radio-player-mpv-{os.getpid()}")

    logger.info(f"Starting MPV player with socket: {socket_path}")

    try:
        # Remove existing socket if it exists
        if os.path.exists(socket_path):
            logger.debug(f"Removing existing socket: {socket_path}")
            os.unlink(socket_path)

        cmd = [
            "mpv",
            "--idle=yes",
            "--no-video",
            "--no-terminal",
            f"--input-ipc-server={socket_path}",
            f"--volume={config.player.volume}",
            "--load-scripts=no",
            "--cache=yes",
        ]

        process = subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
        )

        # Wait for socket to be created
        timeout = 5.0
        start_time = time.time()
        while not os.path.exists(socket_path):
            if time.time() - start_time > timeout:
                logger.error(f"MPV socket creation timeout after {timeout}s")
                process.kill()
                return None
            time.sleep(0.1)

        # Test connection
        if send_mpv_command(socket_path, {"command": ["get_property", "idle-active"]}):
            logger.info("MPV started successfully")
            return PlayerState(socket_path=socket_path, process=process)
        else:
            logger.error("MPV socket connection test failed")
            process.kill()
            return None

    except (subprocess.SubprocessError, OSError) as e:
        logger.error(f"Failed to start MPV: {e}")
        return None


def stop_mpv(state: PlayerState) -> None:
    """Stop MPV process and cleanup."""
    if state.process:
        try:
            state.process.kill()
            state.process.wait(timeout=2.0)
        except (OSError, subprocess.TimeoutExpired):
            pass  # Process already terminated or couldn't be killed

    if state.socket_path and os.path.exists(state.socket_path):
        try:
            os.unlink(state.socket_path)
        except OSError:
            pass


def is_mpv_running(state: PlayerState) -> bool:
    """Check if MPV process is still running."""
    if not state.process:
        return False

    if state.process.poll() is not None:
        return False

    if not state.socket_path or not os.path.exists(state.socket_path):
        return False

    return True


def _request(socket_path: str, command: dict[str, Any]) -> Optional[dict[str, Any]]:
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.settimeout(2.0)
        sock.connect(socket_path)
        sock.sendall((json.dumps(command) + "\n").encode("utf-8"))

        # mpv may interleave event lines; keep the first reply line
        buffer = b""
        while b"\n" not in buffer:
            chunk = sock.recv(4096)
            if not chunk:
                break
            buffer += chunk
    finally:
        sock.close()

    for line in buffer.decode("utf-8").splitlines():
        if not line.strip():
            continue
        response = json.loads(line)
        if "event" not in response:
            return response
    return None


def send_mpv_command(socket_path: Optional[str], command: dict[str, Any]) -> bool:
    """Send JSON IPC command to MPV."""
    if not socket_path or not os.path.exists(socket_path):
        return False

    try:
        response = _request(socket_path, command)
    except (OSError, json.JSONDecodeError) as e:
        logger.debug(f"MPV command {command} failed: {e}")
        return False

    if response is None:
        return True
    return response.get("error") == "success"


def get_mpv_property(socket_path: Optional[str], property_name: str) -> Any:
    """Get a property value from MPV."""
    if not socket_path or not os.path.exists(socket_path):
        return None

    try:
        response = _request(
            socket_path, {"command": ["get_property", property_name]}
        )
    except (OSError, json.JSONDecodeError):
        return None

    if response and response.get("error") == "success":
        return response.get("data")
    return None


class MpvEngine:
    """MediaEngine backed by a running mpv process.

    Calls are fire-and-forget: a failed IPC request is logged at debug
    level and otherwise ignored.
    """

    def __init__(self, state: PlayerState):
        self.state = state

    def load(self, url: str) -> None:
        # Set pause first so the replacement item does not start on its own
        send_mpv_command(self.state.socket_path, {"command": ["set_property", "pause", True]})
        if not send_mpv_command(
            self.state.socket_path, {"command": ["loadfile", url, "replace"]}
        ):
            logger.warning(f"MPV rejected stream: {url}")

    def unload(self) -> None:
        send_mpv_command(self.state.socket_path, {"command": ["stop"]})

    def play(self) -> None:
        send_mpv_command(self.state.socket_path, {"command": ["set_property", "pause", False]})

    def pause(self) -> None:
        send_mpv_command(self.state.socket_path, {"command": ["set_property", "pause", True]})

    def is_playing(self) -> bool:
        """True when an item is loaded and not paused."""
        if not is_mpv_running(self.state):
            return False
        paused = get_mpv_property(self.state.socket_path, "pause")
        idle = get_mpv_property(self.state.socket_path, "idle-active")
        return paused is False and idle is False

    @property
    def rate(self) -> float:
        """Playback rate: 0.0 while not playing, otherwise mpv's speed."""
        if not self.is_playing():
            return 0.0
        speed = get_mpv_property(self.state.socket_path, "speed")
        return float(speed) if speed is not None else 1.0

    def shutdown(self) -> None:
        stop_mpv(self.state)
