"""Protean Engine runner for the notifier domain.

Consumes booking events from the broker and runs the notifier's event
handlers and projectors asynchronously.

Usage:
    python src/server.py
    python src/server.py --test-mode   # drain pending messages, then exit
"""

import argparse
import asyncio

from protean.server.engine import Engine

import notifier.routing  # noqa: F401  (load the package before init() traverses its submodules)
from notifier.utils.logging import configure_logging


def build_engine(test_mode: bool = False) -> Engine:
    """Initialize the notifier domain and wrap it in an Engine."""
    from notifier.domain import notifier

    notifier.init()
    return Engine(notifier, test_mode=test_mode)


async def run(test_mode: bool = False):
    engine = build_engine(test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Notifier Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process what is pending and exit",
    )
    args = parser.parse_args()

    configure_logging()
    asyncio.run(run(test_mode=args.test_mode))


if __name__ == "__main__":
    main()
