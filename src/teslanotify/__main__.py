"""Command line entry point: ``teslanotify`` / ``python -m teslanotify``."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import sys
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import aiohttp

from teslanotify._redact import redact_url
from teslanotify.config import NotifyConfig
from teslanotify.exceptions import TeslaConfigError
from teslanotify.fetcher import TelemetryFetcher
from teslanotify.monitor import ChargeMonitor
from teslanotify.notifier import DingTalkNotifier

_logger = logging.getLogger("teslanotify")


def _resolve_tz(name: str | None) -> tzinfo | None:
    if name is None:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise TeslaConfigError(f"Unknown time zone {name!r}") from exc


async def run(config: NotifyConfig, *, once: bool = False) -> None:
    tz = _resolve_tz(config.time_zone)
    async with aiohttp.ClientSession() as http_session:
        fetcher = TelemetryFetcher(config, http_session)
        notifier = DingTalkNotifier(config, http_session)
        monitor = ChargeMonitor(fetcher, notifier, interval=config.poll_interval, tz=tz)
        _logger.info(
            "Monitoring %s every %ss, notifying %s",
            fetcher.url,
            config.poll_interval,
            redact_url(config.webhook_url),
        )
        await monitor.run(max_ticks=1 if once else None)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="teslanotify",
        description="Poll TeslaMate for charge state changes and notify a DingTalk robot.",
    )
    parser.add_argument("--once", action="store_true", help="Run a single poll cycle and exit")
    parser.add_argument("--interval", type=float, help="Seconds between polls (overrides TESLA_NOTIFY_INTERVAL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    overrides: dict[str, float] = {}
    if args.interval is not None:
        overrides["poll_interval"] = args.interval
    try:
        config = NotifyConfig.from_env(**overrides)
        with contextlib.suppress(KeyboardInterrupt):
            asyncio.run(run(config, once=args.once))
    except TeslaConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
