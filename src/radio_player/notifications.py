"""Desktop notification helpers for Radio Player."""

import shutil
import subprocess
from typing import Literal

from loguru import logger


def notify(
    title: str,
    message: str,
    app_name: str = "Radio Player",
    urgency: Literal["low", "normal", "critical"] = "normal",
) -> None:
    """
    Show a desktop notification using notify-send.

    Args:
        title: Notification title
        message: Notification message body
        app_name: Application name reported to the notification daemon
        urgency: Urgency level ('low', 'normal', 'critical')

    Note:
        Silently skips notification if notify-send is not available.
        Errors are logged but don't interrupt program flow.
    """
    if not shutil.which("notify-send"):
        return

    try:
        subprocess.run(
            [
                "notify-send",
                "--urgency",
                urgency,
                "--app-name",
                app_name,
                "--expire-time",
                "3000",
                title,
                message,
            ],
            check=False,  # Don't raise on error
            timeout=2.0,
            capture_output=True,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.debug(f"notify-send failed: {e}")


class DesktopNotifier:
    """Notifier that only delivers once authorization was granted."""

    def __init__(self, app_name: str = "Radio Player", enabled: bool = True):
        self.app_name = app_name
        self.enabled = enabled
        self.authorized = False

    def request_authorization(self) -> bool:
        """
        Decide whether notifications may be shown.

        Granted when notifications are enabled in settings and a
        notification client is installed.
        """
        self.authorized = self.enabled and shutil.which("notify-send") is not None
        logger.info(
            f"Notification authorization {'granted' if self.authorized else 'denied'}"
        )
        return self.authorized

    def notify(self, title: str, message: str) -> None:
        if not self.authorized:
            logger.debug(f"Notifications not authorized, dropping: {title}: {message}")
            return
        notify(title, message, app_name=self.app_name)
