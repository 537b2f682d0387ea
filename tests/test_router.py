"""Tests for control-socket command routing."""

import pytest

from radio_player import router
from radio_player.domain.playback import NO_SELECTION


def test_quit_stops_loop(dispatcher):
    assert router.handle_command(dispatcher, "quit", []) == (False, True, "Goodbye!")


def test_shortcut_alias(dispatcher, coordinator):
    should_continue, success, message = router.handle_command(dispatcher, "P", [])

    assert should_continue and success
    assert coordinator.current == 0
    assert message == "Playing: A"


def test_next_prev(dispatcher, coordinator):
    router.handle_command(dispatcher, "next", [])
    router.handle_command(dispatcher, "next", [])
    assert coordinator.current == 2
    _, success, message = router.handle_command(dispatcher, "prev", [])
    assert success
    assert message == "Playing: A"


def test_select(dispatcher, coordinator):
    _, success, message = router.handle_command(dispatcher, "select", ["2"])
    assert success
    assert message == "Playing: B"


@pytest.mark.parametrize("args", [[], ["x"], ["1"], ["9"], ["1", "2"]])
def test_select_rejects_bad_arguments(dispatcher, coordinator, args):
    should_continue, success, _ = router.handle_command(dispatcher, "select", args)
    assert should_continue is True
    assert success is False
    assert coordinator.current == NO_SELECTION


def test_reload(dispatcher, coordinator):
    _, success, message = router.handle_command(dispatcher, "reload", [])
    assert success
    assert message == "Reloaded 2 stations"


def test_edit_without_editor_fails(dispatcher):
    _, success, _ = router.handle_command(dispatcher, "edit", [])
    assert success is False


def test_menu(dispatcher):
    _, success, message = router.handle_command(dispatcher, "status", [])
    assert success
    assert "My Radio" in message
    assert "[ 2] B" in message


def test_remote_commands(dispatcher, coordinator, notifier):
    _, success, message = router.handle_command(dispatcher, "remote", ["toggle"])
    assert success
    assert message == "Playing: A"

    router.handle_command(dispatcher, "remote", ["pause"])
    assert coordinator.is_playing is False
    assert notifier.notifications[-1] == ("My Radio", "Pause")


@pytest.mark.parametrize("args", [[], ["rewind"]])
def test_remote_bad_action(dispatcher, args):
    _, success, message = router.handle_command(dispatcher, "remote", args)
    assert success is False
    assert message.startswith("Usage: remote")


def test_unknown_command(dispatcher):
    assert router.handle_command(dispatcher, "dance", []) == (
        True,
        False,
        "Unknown command: 'dance'",
    )


def test_handler_exception_becomes_failure(dispatcher, monkeypatch):
    def explode():
        raise RuntimeError("boom")

    monkeypatch.setattr(dispatcher, "toggle", explode)

    assert router.handle_command(dispatcher, "toggle", []) == (True, False, "Error: boom")
