"""Telemetry fetch from a TeslaMate API server."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Protocol

import aiohttp

from teslanotify._constants import STATUS_ENDPOINT
from teslanotify._redact import redact_url
from teslanotify.config import NotifyConfig
from teslanotify.exceptions import DecodeError, FetchError
from teslanotify.models.snapshot import Snapshot, parse_status_response

_logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Structural fetcher interface used by the monitor.

    Keeps :class:`~teslanotify.monitor.ChargeMonitor` testable with plain
    fakes while :class:`TelemetryFetcher` stays the concrete implementation.
    """

    async def fetch(self) -> Snapshot:
        ...


class TelemetryFetcher:
    """Reads the current vehicle status over HTTP."""

    def __init__(self, config: NotifyConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._url = config.api_url + STATUS_ENDPOINT.format(car_id=config.car_id)

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> Snapshot:
        """Fetch and decode one status snapshot.

        Raises
        ------
        FetchError
            Transport failure, timeout or non-2xx status.
        DecodeError
            Body is not JSON or does not match the status schema.
        """
        url = self._url
        _logger.debug("GET %s", redact_url(url))
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)

        try:
            async with self._http.get(url, timeout=timeout) as resp:
                body = await resp.read()
                if not 200 <= resp.status < 300:
                    raise FetchError(
                        f"HTTP {resp.status} from {redact_url(url)}: {body[:200]!r}",
                        status_code=resp.status,
                        url=url,
                    )
        except FetchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            # ValueError: yarl rejects a relative URL when TESLA_API_URL is unset.
            raise FetchError(f"Request to {redact_url(url)} failed: {exc!r}", url=url) from exc

        try:
            payload = json.loads(body.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Response from {redact_url(url)} is not UTF-8: {body[:200]!r}") from exc
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Invalid JSON from {redact_url(url)}: {body[:200]!r}") from exc

        snapshot = parse_status_response(payload)
        _logger.debug(
            "Snapshot car_id=%s car_name=%s state=%s state_since=%s battery_level=%s plugged_in=%s "
            "charger_actual_current=%s charger_power=%s charger_voltage=%s charger_phases=%s time_to_full_charge=%s "
            "charge_limit_soc=%s charge_energy_added=%s usable_battery_level=%s est_battery_range=%s",
            snapshot.car_id,
            snapshot.car_name,
            snapshot.state,
            snapshot.state_since,
            snapshot.battery_level,
            snapshot.plugged_in,
            snapshot.charger_actual_current,
            snapshot.charger_power,
            snapshot.charger_voltage,
            snapshot.charger_phases,
            snapshot.time_to_full_charge,
            snapshot.charge_limit_soc,
            snapshot.charge_energy_added,
            snapshot.usable_battery_level,
            snapshot.est_battery_range,
        )
        return snapshot
