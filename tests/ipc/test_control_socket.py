"""Round-trip tests for the control socket."""

import queue
import tempfile
import threading
from pathlib import Path

import pytest

from radio_player.ipc import get_socket_path, send_command
from radio_player.ipc.server import IPCServer


@pytest.fixture
def runtime_dir(monkeypatch):
    # Short path: AF_UNIX socket paths are limited to ~100 bytes
    with tempfile.TemporaryDirectory(prefix="rp-") as tmp:
        monkeypatch.setenv("XDG_RUNTIME_DIR", tmp)
        yield Path(tmp)


def test_socket_path_in_runtime_dir(runtime_dir):
    assert get_socket_path() == runtime_dir / "radio-player" / "control.sock"


def test_not_running(runtime_dir):
    assert send_command("next") == (False, "Radio Player is not running")


def test_command_round_trip(runtime_dir):
    command_queue: queue.Queue = queue.Queue()
    response_queue: queue.Queue = queue.Queue()
    server = IPCServer(command_queue, response_queue)
    received = []

    def answer_one():
        request_id, command, args = command_queue.get(timeout=10)
        received.append((command, args))
        response_queue.put((request_id, True, "Playing: A"))

    server.start()
    try:
        worker = threading.Thread(target=answer_one, daemon=True)
        worker.start()

        for _ in range(50):
            if get_socket_path().exists():
                break
            threading.Event().wait(0.1)

        assert send_command("remote", ["toggle"]) == (True, "Playing: A")
        worker.join(timeout=5)
    finally:
        server.stop()

    assert received == [("remote", ["toggle"])]
    assert not get_socket_path().exists()


def test_late_reply_to_earlier_request_is_discarded(runtime_dir):
    command_queue: queue.Queue = queue.Queue()
    response_queue: queue.Queue = queue.Queue()
    server = IPCServer(command_queue, response_queue)

    # Request 1 timed out; its reply arrives after request 2 was handed out
    response_queue.put((1, True, "first"))
    response_queue.put((2, True, "second"))

    assert server._await_response(2) == {"success": True, "message": "second"}
    assert response_queue.empty()


def test_await_response_times_out(runtime_dir, monkeypatch):
    monkeypatch.setattr("radio_player.ipc.server.RESPONSE_TIMEOUT", 0.2)
    server = IPCServer(queue.Queue(), queue.Queue())
    server.response_queue.put((1, True, "stale"))

    assert server._await_response(2) == {
        "success": False,
        "message": "Command timed out",
    }
