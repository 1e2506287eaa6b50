"""ward: manage the license-plate allow-list of an LNPR camera.

Usage:
    ward list
    ward add X111XX777 [2023-11-22 2023-11-23]
    ward edit X111XX777 2023-11-22 2023-11-23
    ward remove X111XX777
    ward clear [2023-11-22]

Connection settings come from CAMERA_IP, CAMERA_USERNAME and CAMERA_PASSWORD.
"""
import argparse
import logging
import sys

from cli.commands import EXIT_FAILURE, EXIT_OK, cmd_add, cmd_clear, cmd_edit, cmd_list, cmd_remove, run_command
from cli.dependencies import get_camera_client

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ward",
        description="Manage the license-plate allow-list of an LNPR camera.",
        epilog="Plates may contain A B C E H K M O P T X Y and digits; dates are YYYY-MM-DD.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log progress (-vv for HTTP details)")
    subparsers = parser.add_subparsers(dest="command", metavar="command")

    list_parser = subparsers.add_parser("list", help="list all plates stored in the camera")
    list_parser.set_defaults(handler=cmd_list)

    add_parser = subparsers.add_parser("add", help="add a plate; dates default to today")
    add_parser.add_argument("plate")
    add_parser.add_argument("begin", nargs="?")
    add_parser.add_argument("end", nargs="?")
    add_parser.set_defaults(handler=cmd_add)

    edit_parser = subparsers.add_parser("edit", help="change the validity dates of a plate")
    edit_parser.add_argument("plate")
    edit_parser.add_argument("begin")
    edit_parser.add_argument("end")
    edit_parser.set_defaults(handler=cmd_edit)

    remove_parser = subparsers.add_parser("remove", help="remove a plate from the camera")
    remove_parser.add_argument("plate")
    remove_parser.set_defaults(handler=cmd_remove)

    clear_parser = subparsers.add_parser("clear", help="remove every plate whose end date is DATE (default today)")
    clear_parser.add_argument("date", nargs="?", default="")
    clear_parser.set_defaults(handler=cmd_clear)

    subparsers.add_parser("help", help="show this message")
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command in (None, "help"):
        parser.print_help()
        return EXIT_OK

    try:
        client = get_camera_client()
    except (RuntimeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    logger.debug("Running %s", args.command)
    return run_command(args.handler, client, args)


if __name__ == "__main__":
    sys.exit(main())
