"""
Send a single event from the command line.

Connection details come from SENTRY_REPORTER_* environment variables
(or a .env file).

Usage:
    sentry-reporter "deploy finished" --level info
    sentry-reporter "checkout failed" --extra order_id=42 --extra retry=true
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional

import httpx
import orjson
from pydantic import ValidationError

from .client import SentryReporter
from .config import ReporterSettings
from .logging_config import configure_logging
from .models import Severity


def parse_extra(pairs: List[str]) -> Dict[str, Any]:
    """
    Parse KEY=VALUE pairs into a metadata mapping.

    Values that parse as JSON keep their type; anything else is a string.
    """
    extra: Dict[str, Any] = {}

    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {pair!r}")
        try:
            extra[key] = orjson.loads(value)
        except orjson.JSONDecodeError:
            extra[key] = value

    return extra


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sentry-reporter",
        description="Send one event to a Sentry store endpoint",
    )
    parser.add_argument("message", help="Event message")
    parser.add_argument(
        "--level",
        choices=[s.value for s in Severity],
        default=Severity.ERROR.value,
        help="Event severity (default: error)",
    )
    parser.add_argument(
        "--extra",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra metadata, may be repeated",
    )
    return parser


async def send(settings: ReporterSettings, level: Severity, message: str, extra: Dict[str, Any]) -> str:
    async with SentryReporter.from_settings(settings) as reporter:
        return await reporter.capture(level, message, extra)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        extra = parse_extra(args.extra)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        settings = ReporterSettings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        event_id = asyncio.run(send(settings, Severity(args.level), args.message, extra))
    except httpx.HTTPError as e:
        print(f"Failed to send event: {e}", file=sys.stderr)
        return 1

    print(event_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
