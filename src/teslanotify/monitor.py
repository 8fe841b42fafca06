"""Poll loop: fetch, detect, notify, remember."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable
from datetime import datetime, tzinfo

from teslanotify._constants import DEFAULT_POLL_INTERVAL
from teslanotify.detector import detect_transitions
from teslanotify.exceptions import DecodeError, DeliveryError, FetchError
from teslanotify.fetcher import Fetcher
from teslanotify.models.events import NotificationEvent
from teslanotify.models.snapshot import Snapshot
from teslanotify.notifier import Notifier
from teslanotify.render import render_event

_logger = logging.getLogger(__name__)


class ChargeMonitor:
    """Runs poll cycles and owns the last observed snapshot.

    One cycle is in flight at a time. A cycle that outlasts the interval
    delays the next one instead of overlapping it.

    Usage::

        monitor = ChargeMonitor(fetcher, notifier, interval=60)
        await monitor.run()
    """

    def __init__(
        self,
        fetcher: Fetcher,
        notifier: Notifier,
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fetcher = fetcher
        self._notifier = notifier
        self._interval = interval
        self._tz = tz
        self._clock = clock
        self._monotonic = monotonic
        self._previous: Snapshot | None = None
        self._stop = asyncio.Event()

    @property
    def previous(self) -> Snapshot | None:
        """Snapshot from the last successfully decoded poll, if any."""
        return self._previous

    def stop(self) -> None:
        """Ask :meth:`run` to return after the current cycle."""
        self._stop.set()

    async def poll_once(self) -> list[NotificationEvent]:
        """Run one poll cycle and return the events that were detected.

        Fetch and decode failures skip the cycle and leave :attr:`previous`
        untouched. Delivery failures are logged per event; the remaining
        events are still sent and the new snapshot is still stored.
        """
        try:
            current = await self._fetcher.fetch()
        except (FetchError, DecodeError) as exc:
            _logger.warning("Skipping poll, telemetry unavailable: %s", exc)
            return []

        events = detect_transitions(self._previous, current)
        for event in events:
            now = self._clock() if self._clock is not None else None
            message = render_event(event, now=now, tz=self._tz)
            try:
                await self._notifier.send(message.title, message.body)
            except DeliveryError as exc:
                _logger.warning("Failed to deliver %s notification: %s", event.kind, exc)
            else:
                _logger.info("Sent %s notification for %s", event.kind, current.car_name)

        self._previous = current
        return events

    async def run(self, *, max_ticks: int | None = None) -> None:
        """Poll immediately, then every ``interval`` seconds until stopped.

        The interval is measured start to start. Ticks missed while a slow
        cycle was running are dropped, not queued.
        """
        ticks = 0
        next_start = self._monotonic()
        while not self._stop.is_set():
            await self.poll_once()
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                return

            next_start += self._interval
            now = self._monotonic()
            if next_start < now:
                skipped = int((now - next_start) // self._interval) + 1
                _logger.debug("Poll overran the interval, skipping %d tick(s)", skipped)
                next_start += skipped * self._interval
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(self._stop.wait(), timeout=next_start - now)
