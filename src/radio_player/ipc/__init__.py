"""IPC (Inter-Process Communication) for Radio Player.

Lets the CLI and media-key bindings drive a running player.
"""

from .client import get_socket_path, send_command

__all__ = ["get_socket_path", "send_command"]
