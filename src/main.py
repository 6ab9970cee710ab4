"""
Command-line driver for the pattern demos.

Runs the Prototype, Singleton and Proxy walkthroughs and prints the lines
each one produces.

Usage:
    python -m src.main
    python -m src.main --demo proxy --demo singleton
    python -m src.main --list
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from src.config import get_config
from src.constants import LOG_FORMAT
from src.demos import DEMOS, run_all

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the Prototype, Singleton and Proxy pattern demos."
    )
    parser.add_argument(
        "--demo",
        action="append",
        choices=list(DEMOS),
        help="Demo to run (repeatable). Runs every demo when omitted.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available demos and exit",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print demo output lines",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # Load environment variables before reading config
    load_dotenv()

    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format=LOG_FORMAT,
    )

    args = build_parser().parse_args(argv)

    if args.list:
        for name in DEMOS:
            print(name)
        return 0

    results = run_all(args.demo)

    if config.echo_output and not args.quiet:
        for name, lines in results.items():
            print(f"=== {name} ===")
            for line in lines:
                print(line)

    logger.info(f"Ran {len(results)} demo(s): {', '.join(results)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
