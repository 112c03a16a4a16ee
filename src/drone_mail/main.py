from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from .build.context import BuildContext
from .config import ConfigurationError, PluginSettings, load_environment
from .pipeline.notify import run_notification


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Email the commit author through Amazon SES when a Drone build breaks or recovers."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Decide and render the notification without calling SES.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    load_environment()

    logging.basicConfig(
        level=logging.DEBUG if os.getenv("PLUGIN_DEBUG") else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = PluginSettings.from_env()
    except ConfigurationError as exc:
        logging.error("%s", exc)
        return 1

    context = BuildContext.from_env()
    logging.debug(
        "Build %s on %s finished with status %s",
        context.build,
        context.branch,
        context.status,
    )

    run_notification(context, settings, dry_run=args.dry_run)
    return 0


if __name__ == "__main__":
    sys.exit(main())
