"""Vehicle status snapshot model.

Mapped from the TeslaMate API ``/v1/cars/{car_id}/status`` response::

    {"data": {"car": {"car_id": 1, "car_name": "..."},
              "status": {"state": "...", "state_since": "...",
                         "charging_details": {...},
                         "battery_details": {...}}}}
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from teslanotify._constants import CHARGING_STATE
from teslanotify.exceptions import DecodeError

_logger = logging.getLogger(__name__)

_CHARGING_KEYS = (
    "plugged_in",
    "charger_actual_current",
    "charger_power",
    "charger_voltage",
    "charger_phases",
    "charge_limit_soc",
    "charge_energy_added",
    "time_to_full_charge",
)
_BATTERY_KEYS = (
    "battery_level",
    "usable_battery_level",
    "est_battery_range",
)


class Snapshot(BaseModel):
    """One fetched telemetry reading.

    Required fields must all be present in the payload; optional extras are
    ``None`` when the server omits them. Non-finite floats (``Infinity``,
    ``NaN``) are rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    car_id: int
    car_name: str
    state: str
    """Vehicle state as reported (``charging``, ``online``, ``asleep``, ...)."""
    state_since: str
    """RFC 3339 timestamp of the last state change, kept as sent."""
    battery_level: int = Field(ge=0, le=100)
    """State of charge (0-100 percent)."""
    plugged_in: bool
    """Charge connector physically inserted."""
    charger_actual_current: int
    """Charger current in amperes."""
    charger_power: int
    """Charger power in kW."""
    time_to_full_charge: float
    """Hours until full; ``0`` when not charging or already complete."""

    charger_voltage: int | None = None
    charger_phases: int | None = None
    charge_limit_soc: int | None = None
    charge_energy_added: float | None = None
    usable_battery_level: int | None = None
    est_battery_range: float | None = None

    @property
    def is_charging(self) -> bool:
        return self.state == CHARGING_STATE

    @property
    def seconds_to_full_charge(self) -> int:
        """Remaining charge time in whole seconds, truncated toward zero."""
        return int(3600 * self.time_to_full_charge)

    @property
    def minutes_to_full_charge(self) -> int:
        return int(60 * self.time_to_full_charge)


def _section(container: Any, key: str, path: str) -> dict[str, Any]:
    value = container.get(key) if isinstance(container, dict) else None
    if not isinstance(value, dict):
        raise DecodeError(f"status payload is missing object {path}")
    return value


def parse_status_response(payload: Any) -> Snapshot:
    """Flatten a TeslaMate status response into a :class:`Snapshot`.

    Raises
    ------
    DecodeError
        If a section is missing or any required field is absent or has the
        wrong type.
    """
    data = _section(payload, "data", "data")
    car = _section(data, "car", "data.car")
    status = _section(data, "status", "data.status")
    charging = _section(status, "charging_details", "data.status.charging_details")
    battery = _section(status, "battery_details", "data.status.battery_details")

    flat: dict[str, Any] = {
        "car_id": car.get("car_id"),
        "car_name": car.get("car_name"),
        "state": status.get("state"),
        "state_since": status.get("state_since"),
    }
    for key in _CHARGING_KEYS:
        if key in charging:
            flat[key] = charging[key]
    for key in _BATTERY_KEYS:
        if key in battery:
            flat[key] = battery[key]

    try:
        return Snapshot.model_validate(flat)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(loc) for loc in err["loc"]) for err in exc.errors())
        _logger.debug("Status payload rejected: %s", exc)
        raise DecodeError(f"status payload failed validation: {fields}") from exc
