"""Tests for desktop notifications."""

import subprocess
from unittest.mock import patch

from radio_player import notifications
from radio_player.notifications import DesktopNotifier


def test_authorization_denied_when_disabled():
    with patch("radio_player.notifications.shutil.which", return_value="/usr/bin/notify-send"):
        notifier = DesktopNotifier(enabled=False)
        assert notifier.request_authorization() is False


def test_authorization_denied_without_client():
    with patch("radio_player.notifications.shutil.which", return_value=None):
        assert DesktopNotifier().request_authorization() is False


def test_unauthorized_notify_is_dropped():
    with patch("radio_player.notifications.subprocess.run") as run:
        DesktopNotifier().notify("Radio", "Play A")
    run.assert_not_called()


def test_authorized_notify_calls_notify_send():
    with (
        patch("radio_player.notifications.shutil.which", return_value="/usr/bin/notify-send"),
        patch("radio_player.notifications.subprocess.run") as run,
    ):
        notifier = DesktopNotifier(app_name="Tuner")
        assert notifier.request_authorization() is True
        notifier.notify("Radio", "Play A")

    argv = run.call_args.args[0]
    assert argv[0] == "notify-send"
    assert argv[-2:] == ["Radio", "Play A"]
    assert "Tuner" in argv


def test_notify_send_failure_is_swallowed():
    with (
        patch("radio_player.notifications.shutil.which", return_value="/usr/bin/notify-send"),
        patch(
            "radio_player.notifications.subprocess.run",
            side_effect=subprocess.TimeoutExpired("notify-send", 2.0),
        ),
    ):
        notifications.notify("Radio", "Pause")
