from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import pytest

from teslanotify.models.snapshot import Snapshot

_STATUS_RESPONSE: dict[str, Any] = {
    "data": {
        "car": {"car_id": 1, "car_name": "Model 3"},
        "status": {
            "display_name": "Model 3",
            "state": "online",
            "state_since": "2024-03-01T08:12:33Z",
            "charging_details": {
                "plugged_in": False,
                "charger_actual_current": 0,
                "charger_phases": 0,
                "charger_power": 0,
                "charger_voltage": 0,
                "charge_limit_soc": 90,
                "charge_energy_added": 0.0,
                "time_to_full_charge": 0.0,
            },
            "battery_details": {
                "battery_level": 64,
                "usable_battery_level": 63,
                "est_battery_range": 281.3,
            },
        },
    }
}


@pytest.fixture
def status_response() -> dict[str, Any]:
    return copy.deepcopy(_STATUS_RESPONSE)


@pytest.fixture
def make_snapshot() -> Callable[..., Snapshot]:
    def _make(**overrides: Any) -> Snapshot:
        fields: dict[str, Any] = {
            "car_id": 1,
            "car_name": "Model 3",
            "state": "online",
            "state_since": "2024-03-01T08:12:33Z",
            "battery_level": 64,
            "plugged_in": False,
            "charger_actual_current": 0,
            "charger_power": 0,
            "time_to_full_charge": 0.0,
        }
        fields.update(overrides)
        return Snapshot(**fields)

    return _make
