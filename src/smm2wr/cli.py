"""Command-line entry point: ``smm2wr`` / ``python -m smm2wr``."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from smm2wr.client import WorldRecordClient
from smm2wr.config import LoggerConfig
from smm2wr.course_ids import load_course_ids
from smm2wr.exceptions import ConfigurationError, CorruptDataError
from smm2wr.history.store import HistoryStore
from smm2wr.scheduler import PollScheduler

_logger = logging.getLogger("smm2wr")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smm2wr",
        description="Log world-record changes of Super Mario Maker 2 courses.",
    )
    parser.add_argument("--course-ids", dest="course_ids_path", help="JSON array of course IDs to track")
    parser.add_argument("--history", dest="history_path", help="JSON file the record history is kept in")
    parser.add_argument("--period", dest="poll_period", type=float, help="Seconds between updates (default: 120)")
    parser.add_argument("--once", action="store_true", help="Run a single update and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


async def run(config: LoggerConfig, *, once: bool = False) -> int:
    """Validate configuration, load the history and poll.

    Returns the process exit code. Without *once* this only returns when
    startup fails.
    """
    try:
        course_ids = load_course_ids(config.course_ids_path)
        store = HistoryStore(config.history_path)
        history = store.load()
    except (ConfigurationError, CorruptDataError, OSError) as exc:
        _logger.error("%s", exc)
        return 1
    _logger.info("Loaded %d course IDs and world record data.", len(course_ids))

    async with WorldRecordClient(config) as client:
        scheduler = PollScheduler(client, store, history, course_ids, period=config.poll_period)
        if once:
            result = await scheduler.run_cycle()
            return 0 if result.ok else 1
        await scheduler.run_forever()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    _logger.info("Starting SMM2 World Record Logger...")
    try:
        config = LoggerConfig.from_env(
            course_ids_path=args.course_ids_path,
            history_path=args.history_path,
            poll_period=args.poll_period,
        )
    except ConfigurationError as exc:
        _logger.error("%s", exc)
        return 1

    try:
        return asyncio.run(run(config, once=args.once))
    except KeyboardInterrupt:
        _logger.info("Stopped.")
        return 0
