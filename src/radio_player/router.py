"""
Command routing for Radio Player.

Routes control-socket commands to dispatcher handlers.
"""

from typing import List, Tuple

from loguru import logger

from radio_player.dispatcher import CommandDispatcher
from radio_player.ui import render_menu

# Menu keyboard shortcuts
ALIASES = {
    "p": "toggle",
    "b": "prev",
    "n": "next",
    "q": "quit",
    "previous": "prev",
    "status": "menu",
}

REMOTE_COMMANDS = {
    "play": CommandDispatcher.remote_play,
    "pause": CommandDispatcher.remote_pause,
    "toggle": CommandDispatcher.remote_toggle,
    "next": CommandDispatcher.remote_next,
    "prev": CommandDispatcher.remote_previous,
    "previous": CommandDispatcher.remote_previous,
}


def _now_playing(dispatcher: CommandDispatcher) -> str:
    coordinator = dispatcher.coordinator
    title = coordinator.current_title()
    if not title:
        return "No station selected"
    state = "Playing" if coordinator.is_playing else "Paused"
    return f"{state}: {title}"


def handle_command(
    dispatcher: CommandDispatcher, command: str, args: List[str]
) -> Tuple[bool, bool, str]:
    """
    Handle a single command on the dispatch loop.

    Args:
        dispatcher: Command dispatcher
        command: Command name
        args: Command arguments

    Returns:
        (should_continue, success, message)
    """
    command = ALIASES.get(command.lower(), command.lower())

    try:
        if command == "quit":
            return False, True, "Goodbye!"

        elif command == "toggle":
            dispatcher.toggle()
            return True, True, _now_playing(dispatcher)

        elif command == "next":
            dispatcher.next()
            return True, True, _now_playing(dispatcher)

        elif command == "prev":
            dispatcher.previous()
            return True, True, _now_playing(dispatcher)

        elif command == "select":
            if len(args) != 1:
                return True, False, "Usage: select <index>"
            try:
                index = int(args[0])
            except ValueError:
                return True, False, f"Invalid station index: '{args[0]}'"
            if not dispatcher.select(index):
                return True, False, f"No station at index {index}"
            return True, True, _now_playing(dispatcher)

        elif command == "reload":
            if dispatcher.reload():
                count = len(dispatcher.coordinator.stations)
                return True, True, f"Reloaded {count} stations"
            return True, False, "Reload failed, see log for details"

        elif command == "edit":
            if dispatcher.edit():
                return True, True, "Editor opened; stations reload when it closes"
            return True, False, "Could not open editor, see log for details"

        elif command == "menu":
            return True, True, "\n".join(render_menu(dispatcher.coordinator))

        elif command == "remote":
            if len(args) != 1 or args[0].lower() not in REMOTE_COMMANDS:
                available = ", ".join(sorted(REMOTE_COMMANDS))
                return True, False, f"Usage: remote <{available}>"
            handler = REMOTE_COMMANDS[args[0].lower()]
            return True, handler(dispatcher), _now_playing(dispatcher)

        else:
            return True, False, f"Unknown command: '{command}'"

    except Exception as e:
        logger.exception(f"Command failed: {command} {args}")
        return True, False, f"Error: {e}"
