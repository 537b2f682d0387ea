"""IPC server for receiving commands from external processes."""

import json
import queue
import socket
import threading
import time
from typing import Optional

from loguru import logger

from .client import get_socket_path

# Seconds a client waits for the dispatch loop to answer
RESPONSE_TIMEOUT = 15.0


class IPCServer:
    """Unix socket server for IPC commands.

    Runs in a background thread and forwards every request to the main
    thread through command_queue, so all state changes happen on the
    dispatch loop. Clients are served one at a time.
    """

    def __init__(self, command_queue: queue.Queue, response_queue: queue.Queue):
        """
        Initialize IPC server.

        Args:
            command_queue: Queue of (request_id, command, args) for the main thread
            response_queue: Queue of (request_id, success, message) from the main thread
        """
        self.command_queue = command_queue
        self.response_queue = response_queue
        self.socket_path = get_socket_path()
        self.server_socket: Optional[socket.socket] = None
        self.running = False
        self.thread: Optional[threading.Thread] = None
        self._next_request_id = 0

    def start(self) -> None:
        """Start the IPC server in a background thread."""
        if self.running:
            return

        self.socket_path.parent.mkdir(parents=True, exist_ok=True)

        # Remove stale socket if it exists
        if self.socket_path.exists():
            try:
                self.socket_path.unlink()
            except OSError:
                pass

        self.server_socket = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self.server_socket.bind(str(self.socket_path))
        self.server_socket.listen(5)
        self.server_socket.settimeout(1.0)  # Poll every second

        self.running = True
        self.thread = threading.Thread(
            target=self._run_server, daemon=True, name="IPCServer"
        )
        self.thread.start()
        logger.info(f"IPC server listening on {self.socket_path}")

    def stop(self) -> None:
        """Stop the IPC server and cleanup."""
        self.running = False

        # Close server socket to unblock accept()
        if self.server_socket:
            try:
                self.server_socket.close()
            except OSError:
                pass

        if self.thread and self.thread.is_alive():
            self.thread.join(timeout=2.0)

        if self.socket_path.exists():
            try:
                self.socket_path.unlink()
            except OSError:
                pass

    def _run_server(self) -> None:
        """Run the Unix socket server loop."""
        try:
            while self.running:
                try:
                    client_socket, _ = self.server_socket.accept()
                    self._handle_client(client_socket)
                except socket.timeout:
                    continue
                except OSError as e:
                    if self.running:
                        logger.error(f"Error accepting connection: {e}")

        except OSError:
            logger.exception("IPC server error")
        finally:
            if self.server_socket:
                self.server_socket.close()

    def _handle_client(self, client_socket: socket.socket) -> None:
        """
        Handle a client connection.

        Args:
            client_socket: Connected client socket
        """
        try:
            data = b""
            while True:
                chunk = client_socket.recv(4096)
                if not chunk:
                    break
                data += chunk
                if b"\n" in data:
                    break

            if not data:
                return

            payload = json.loads(data.decode("utf-8").strip())
            command = str(payload.get("command", ""))
            args = [str(arg) for arg in payload.get("args", [])]

            self._next_request_id += 1
            request_id = self._next_request_id
            self.command_queue.put((request_id, command, args))

            self._send(client_socket, self._await_response(request_id))

        except (json.JSONDecodeError, UnicodeDecodeError, AttributeError) as e:
            self._send(client_socket, {"success": False, "message": f"Invalid JSON: {e}"})
        except OSError as e:
            logger.warning(f"IPC client error: {e}")
        finally:
            client_socket.close()

    def _await_response(self, request_id: int) -> dict:
        """
        Wait for the dispatch loop to answer request_id.

        Late replies to earlier, timed-out requests are discarded.

        Args:
            request_id: Id handed out with the request

        Returns:
            Response payload for the client
        """
        deadline = time.monotonic() + RESPONSE_TIMEOUT
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return {"success": False, "message": "Command timed out"}

            try:
                response_id, success, message = self.response_queue.get(
                    timeout=remaining
                )
            except queue.Empty:
                return {"success": False, "message": "Command timed out"}

            if response_id == request_id:
                return {"success": success, "message": message}

            logger.warning(
                f"Discarding stale IPC response {response_id} "
                f"(waiting for {request_id})"
            )

    def _send(self, client_socket: socket.socket, response: dict) -> None:
        try:
            client_socket.sendall((json.dumps(response) + "\n").encode("utf-8"))
        except OSError as e:
            logger.debug(f"Failed to send IPC response: {e}")
