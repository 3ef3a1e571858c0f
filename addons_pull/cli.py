"""CLI entrypoint for addons-pull."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_config
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator

SKIP_CLONE_MARKER = "-"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addons-pull",
        description="Mirror ScratchAddons into a bundler-friendly build tree.",
    )
    parser.add_argument(
        "skip_marker",
        nargs="?",
        choices=[SKIP_CLONE_MARKER],
        metavar="-",
        help="Skip the clone and reuse the existing upstream checkout.",
    )
    parser.add_argument(
        "--skip-clone",
        action="store_true",
        help="Same as passing '-'.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Directory that receives the generated outputs (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (defaults to <root>/.addons-pull.yml).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for addons-pull."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)
    logger = get_logger("cli")

    skip_clone = args.skip_marker == SKIP_CLONE_MARKER or bool(args.skip_clone)
    config_path = Path(args.config) if args.config else None

    try:
        config = load_config(Path(args.root), config_path)
        result = Orchestrator(config).run(skip_clone=skip_clone)
    except Exception as exc:
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("Pull failed")
        parser.exit(1, f"addons-pull failed: {exc}\nRun with --verbose for more details.\n")

    print(
        f"Pulled {len(result.addons)} addons and {len(result.meta.languages)} locales "
        f"at {result.meta.commit}"
    )


if __name__ == "__main__":
    main(sys.argv[1:])
