"""
External editor launch for the station list.

The editor runs as a child process. A watcher thread waits for it to exit
and then fires the completion callback once.
"""

import os
import shlex
import shutil
import subprocess
import threading
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

# Tried in order when neither the settings nor the environment name an editor
FALLBACK_EDITORS = [
    ["gnome-text-editor", "--standalone"],
    ["gedit", "--wait", "--new-window"],
    ["kate", "--block"],
    ["mousepad", "--disable-server"],
    ["xed", "--wait"],
]

# Need a controlling terminal; the player runs editors detached from one
TERMINAL_EDITORS = {
    "vi", "vim", "nvim", "nano", "pico", "micro", "hx", "helix",
    "kak", "joe", "ne", "mg", "ed",
}


def resolve_editor(command: Optional[str] = None) -> Optional[list[str]]:
    """
    Work out which editor command to run.

    The configured command is used as given. Terminal editors named by
    $VISUAL or $EDITOR are passed over in favour of a desktop editor.

    Args:
        command: Editor command from settings, if any

    Returns:
        Argument list without the file path, or None if no editor is found
    """
    if command:
        argv = shlex.split(command)
        if argv and shutil.which(argv[0]):
            return argv
        logger.warning(f"Editor not found: {command}")

    for variable in ("VISUAL", "EDITOR"):
        candidate = os.environ.get(variable)
        if not candidate:
            continue
        argv = shlex.split(candidate)
        if not argv or not shutil.which(argv[0]):
            logger.warning(f"Editor not found: {candidate}")
        elif os.path.basename(argv[0]) in TERMINAL_EDITORS:
            logger.info(f"Skipping terminal editor from ${variable}: {candidate}")
        else:
            return argv

    for argv in FALLBACK_EDITORS:
        if shutil.which(argv[0]):
            return list(argv)

    return None


def _wait_then_notify(
    process: subprocess.Popen, done_handler: Callable[[], None]
) -> None:
    returncode = process.wait()
    logger.info(f"Editor exited with code {returncode}")
    try:
        done_handler()
    except Exception:
        logger.exception("Editor completion handler failed")


def edit_config(
    path: Path,
    done_handler: Optional[Callable[[], None]] = None,
    command: Optional[str] = None,
) -> Optional[subprocess.Popen]:
    """
    Open the station list in an external editor.

    Args:
        path: File to edit
        done_handler: Called once, from a watcher thread, when the editor exits
        command: Editor command from settings

    Returns:
        The editor process, or None if it could not be started
    """
    if not path.exists():
        logger.error(f"Configuration file not found: {path}")
        return None

    argv = resolve_editor(command)
    if argv is None:
        logger.error("No text editor found (set [editor] command, $VISUAL or $EDITOR)")
        return None

    try:
        process = subprocess.Popen(
            argv + [str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.error(f"Failed to launch editor {argv[0]}: {e}")
        return None

    logger.info(f"Edit started: {argv[0]} {path} (pid={process.pid})")

    if done_handler is not None:
        watcher = threading.Thread(
            target=_wait_then_notify,
            args=(process, done_handler),
            daemon=True,
            name="EditorWatcher",
        )
        watcher.start()

    return process
