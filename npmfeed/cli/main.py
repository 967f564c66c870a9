from __future__ import annotations

import argparse
import sys
from typing import List

from ..config import Configuration, resolve_config
from ..core.errors import FeedSetupError
from ..core.executor import Executor
from ..core.feed import plan_feed_actions

APP_SERVICE_WARNING = (
    "The current environment does not appear to be Azure App Service. "
    "This script is only designed for Azure App Service at this time."
)


def cmd_configure(args: argparse.Namespace, config: Configuration) -> int:
    try:
        actions = plan_feed_actions(config)
    except FeedSetupError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not actions:
        print("No private feed configured, nothing to do.")
        return 0

    if args.dry_run:
        for a in actions:
            print(f"  DRY-RUN: {a.__class__.__name__} -> {a.describe()}")
        return 0

    ok, msg = Executor().run(actions)
    if not ok:
        print(msg, file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="npmfeed",
        description="Configure npm authentication for a private feed from environment variables",
    )
    p.add_argument(
        "--dry-run", action="store_true", help="Print actions without executing"
    )
    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config()
    except FeedSetupError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not config.on_app_service:
        print(APP_SERVICE_WARNING, file=sys.stderr)

    return cmd_configure(args, config)
