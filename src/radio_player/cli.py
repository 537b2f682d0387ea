"""
Radio Player CLI - Entry point with IPC support

Without a subcommand the player runs in the foreground. Subcommands talk
to that running player over the control socket; bind the 'remote' ones to
media keys.
"""

import argparse
import sys

from radio_player import ipc
from radio_player.core import config as core_config
from radio_player.core.console import safe_print
from radio_player.domain.stations import create_default_stations

REMOTE_ACTIONS = ["play", "pause", "toggle", "next", "prev"]


def send_ipc_command(command: str, args: list) -> int:
    """
    Send a command to the running Radio Player via IPC.

    Args:
        command: Command name
        args: Command arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    success, message = ipc.send_command(command, args)

    if success:
        safe_print(message)
        return 0
    else:
        safe_print(message, style="red")
        return 1


def run_init() -> int:
    """Write default settings and a sample station list if missing."""
    config = core_config.load_config()  # Creates config.toml on first run
    stations_path = core_config.get_stations_path(config)

    if stations_path.exists():
        safe_print(f"Station list already exists: {stations_path}")
        return 0

    try:
        stations_path.parent.mkdir(parents=True, exist_ok=True)
        stations_path.write_text(create_default_stations() + "\n", encoding="utf-8")
    except OSError as e:
        safe_print(f"Failed to write {stations_path}: {e}", style="red")
        return 1

    safe_print(f"✓ Created station list: {stations_path}", style="green")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radio-player",
        description="Radio Player - streaming radio stations from a station list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    # Menu actions
    subparsers.add_parser("toggle", help="Play/Pause")
    subparsers.add_parser("next", help="Play next station")
    subparsers.add_parser("prev", help="Play previous station")
    select_parser = subparsers.add_parser("select", help="Play station by index")
    select_parser.add_argument("index", type=int, help="Station index (see 'menu')")
    subparsers.add_parser("reload", help="Reload the station list")
    subparsers.add_parser("edit", help="Edit the station list, reload when done")
    subparsers.add_parser("menu", help="Show stations and current selection")
    subparsers.add_parser("quit", help="Stop the running player")

    # Remote-control commands (media keys)
    remote_parser = subparsers.add_parser(
        "remote", help="Remote-control command, with desktop notification"
    )
    remote_parser.add_argument("action", choices=REMOTE_ACTIONS)

    # Local utility
    subparsers.add_parser("init", help="Create default settings and station list")

    return parser


def main() -> None:
    """Main entry point for the radio-player command."""
    args = build_parser().parse_args()

    if args.subcommand is None:
        from .main import run

        sys.exit(run())

    if args.subcommand == "init":
        sys.exit(run_init())

    if args.subcommand == "select":
        sys.exit(send_ipc_command("select", [str(args.index)]))

    if args.subcommand == "remote":
        sys.exit(send_ipc_command("remote", [args.action]))

    sys.exit(send_ipc_command(args.subcommand, []))


if __name__ == "__main__":
    main()
