# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pubsync.app import sync_publications
from pubsync.config import configure_logging, get_content_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sync ORCID and OpenAlex publications into MDX documents"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory holding the generated .mdx files "
        "(defaults to $PUBSYNC_OUTPUT_DIR or src/content/publications)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        stream=sys.stdout,
    )

    try:
        content_config = get_content_config(output_dir=parsed_args.output_dir)
        result = sync_publications(content_config=content_config)
    except Exception as exc:  # noqa: BLE001
        log.exception("Publication sync failed")
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"\nDone: {result.persistence.summary()}")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
