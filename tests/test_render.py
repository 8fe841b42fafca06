from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from teslanotify.models.events import EventKind, NotificationEvent
from teslanotify.render import TITLES, format_state_since, render_event

_NOW = datetime(2024, 3, 1, 9, 30, 0, tzinfo=UTC)


def test_every_event_kind_has_a_title() -> None:
    assert set(TITLES) == set(EventKind)


def test_format_state_since_converts_to_requested_zone() -> None:
    shanghai = timezone(timedelta(hours=8))

    assert format_state_since("2024-03-01T08:12:33Z", shanghai) == "2024-03-01 16:12:33"
    assert format_state_since("2024-03-01T08:12:33+02:00", UTC) == "2024-03-01 06:12:33"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "yesterday",
        "2024-13-45T99:00:00Z",
        "2024-03-01T08:12:33",
        "2024-03-01 08:12:33+00:00",
        "20240301T081233Z",
        "2024-03-01T08:12Z",
    ],
)
def test_format_state_since_falls_back_to_raw(raw: str) -> None:
    assert format_state_since(raw, UTC) == raw


def test_format_state_since_drops_fractional_seconds() -> None:
    assert format_state_since("2024-03-01T08:12:33.123456789Z", UTC) == "2024-03-01 08:12:33"


def test_render_minimal_body(make_snapshot) -> None:
    snapshot = make_snapshot(state="asleep", battery_level=64)
    event = NotificationEvent(kind=EventKind.STARTED_MONITORING, snapshot=snapshot)

    message = render_event(event, now=_NOW, tz=UTC)

    assert message.title == "Monitoring started"
    assert message.body.startswith("## Tesla Monitoring started")
    assert "Model 3" in message.body
    assert "asleep" in message.body
    assert "64%" in message.body
    assert "2024-03-01 08:12:33" in message.body
    assert message.body.rstrip().endswith("###### 2024-03-01 09:30:00")
    assert "Plugged in" not in message.body
    assert "Charger current" not in message.body
    assert "Charger power" not in message.body
    assert "Time to full" not in message.body


def test_render_charging_details(make_snapshot) -> None:
    snapshot = make_snapshot(
        state="charging",
        plugged_in=True,
        charger_actual_current=16,
        charger_power=11,
        time_to_full_charge=2.5,
    )
    event = NotificationEvent(kind=EventKind.CHARGING_STARTED, snapshot=snapshot)

    message = render_event(event, now=_NOW, tz=UTC)

    assert message.title == "Charging started"
    assert "#### - Plugged in\tyes" in message.body
    assert "#### - Charger current\t16A" in message.body
    assert "#### - Charger power\t11kW" in message.body
    assert "#### - Time to full\t150 min" in message.body


def test_render_omits_remaining_time_when_zero(make_snapshot) -> None:
    snapshot = make_snapshot(plugged_in=True, time_to_full_charge=0.0)
    event = NotificationEvent(kind=EventKind.CHARGING_COMPLETE, snapshot=snapshot)

    message = render_event(event, now=_NOW, tz=UTC)

    assert "Plugged in" in message.body
    assert "Time to full" not in message.body


def test_render_keeps_unparseable_state_since(make_snapshot) -> None:
    snapshot = make_snapshot(state_since="not-a-timestamp")
    event = NotificationEvent(kind=EventKind.PLUG_DISCONNECTED, snapshot=snapshot)

    message = render_event(event, now=_NOW, tz=UTC)

    assert "#### - State since\tnot-a-timestamp" in message.body


def test_render_timestamp_is_render_time_not_snapshot_time(make_snapshot) -> None:
    snapshot = make_snapshot(state_since="2020-01-01T00:00:00Z")
    event = NotificationEvent(kind=EventKind.PLUG_CONNECTED, snapshot=snapshot)

    message = render_event(event, now=datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC), tz=UTC)

    assert "###### 2024-06-01 12:00:00" in message.body
