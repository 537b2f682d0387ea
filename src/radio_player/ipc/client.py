"""IPC client for sending commands to a running Radio Player instance."""

import json
import socket
from pathlib import Path
from typing import List, Optional, Tuple

from radio_player.core.config import get_runtime_dir


def get_socket_path() -> Path:
    """
    Get the path to the Radio Player control socket.

    Returns:
        Path to Unix socket
    """
    return get_runtime_dir() / "control.sock"


def send_command(command: str, args: Optional[List[str]] = None) -> Tuple[bool, str]:
    """
    Send a command to the running Radio Player instance.

    Args:
        command: Command name (e.g., 'next', 'select', 'remote')
        args: Command arguments (optional)

    Returns:
        (success, message) tuple
            success: True if command executed successfully
            message: Response message or error description
    """
    socket_path = get_socket_path()

    if not socket_path.exists():
        return False, "Radio Player is not running"

    payload = {
        "command": command,
        "args": args or [],
    }

    try:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(5.0)
        try:
            sock.connect(str(socket_path))

            message = json.dumps(payload) + "\n"
            sock.sendall(message.encode("utf-8"))

            response_data = b""
            while True:
                chunk = sock.recv(4096)
                if not chunk:
                    break
                response_data += chunk
                # Complete JSON response ends with newline
                if b"\n" in response_data:
                    break
        finally:
            sock.close()

        if not response_data:
            return False, "No response from Radio Player"

        response = json.loads(response_data.decode("utf-8").strip())
        return response.get("success", False), response.get("message", "No message")

    except socket.timeout:
        return False, "Radio Player not responding (timeout)"
    except (ConnectionRefusedError, FileNotFoundError):
        return False, "Radio Player not running"
    except json.JSONDecodeError as e:
        return False, f"Invalid response from Radio Player: {e}"
    except OSError as e:
        return False, f"Failed to send command: {e}"
