import argparse
import sys

from .config import TogoConfig
from .headless import HeadlessApp
from .session import Session
from .store import JsonTaskStore, StoreError
from .tui import TogoApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="togo", description="Terminal task list manager."
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="data_location",
        type=str,
        default=None,
        help="data file path (overrides the config file)",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="print the task list and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = TogoConfig.from_settings(data_location=args.data_location)

    if args.list:
        HeadlessApp(config).run()
        return

    store = JsonTaskStore(config.data_location)
    try:
        tasks = store.load()
    except StoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    app = TogoApp(Session(tasks, store), config)
    try:
        app.run()
    except Exception as e:
        print(f"Error running program: {e}", file=sys.stderr)
        sys.exit(1)

    if app.fatal_error:
        print(f"Error: {app.fatal_error}", file=sys.stderr)
        sys.exit(1)
    if app.return_code:
        sys.exit(app.return_code)
