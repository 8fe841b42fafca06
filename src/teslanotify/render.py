"""Markdown rendering of notification events for DingTalk robots."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, tzinfo

from teslanotify._constants import DISPLAY_TIME_FORMAT
from teslanotify.models.events import EventKind, NotificationEvent

TITLES: dict[EventKind, str] = {
    EventKind.STARTED_MONITORING: "Monitoring started",
    EventKind.PLUG_CONNECTED: "Plug connected",
    EventKind.CHARGING_STARTED: "Charging started",
    EventKind.CHARGING_STOPPED: "Charging stopped",
    EventKind.PLUG_DISCONNECTED: "Plug disconnected",
    EventKind.CHARGING_COMPLETE: "Charging complete",
    EventKind.CHARGING_ALMOST_COMPLETE: "Charging almost complete",
}

# Date, "T", time with seconds, optional fraction, then "Z" or a numeric offset.
_RFC3339 = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})")

# DingTalk markdown needs two trailing spaces for a hard line break.
_LINE_END = "  \n  "


@dataclass(frozen=True, slots=True)
class RenderedMessage:
    title: str
    body: str


def format_state_since(raw: str, tz: tzinfo | None = None) -> str:
    """Format an RFC 3339 timestamp as local calendar time.

    Anything that is not a valid RFC 3339 timestamp is returned unchanged.
    """
    match = _RFC3339.fullmatch(raw)
    if match is None:
        return raw
    # Fractions of a second are not displayed.
    try:
        parsed = datetime.fromisoformat(raw[:19] + match.group(2))
    except ValueError:
        return raw
    return parsed.astimezone(tz).strftime(DISPLAY_TIME_FORMAT)


def _detail(label: str, value: object) -> str:
    return f"#### - {label}\t{value}{_LINE_END}"


def render_event(
    event: NotificationEvent,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> RenderedMessage:
    """Render *event* into a title and a markdown body.

    ``now`` is the render time printed at the bottom of the message; it
    defaults to the current time in ``tz`` (system local when ``None``).
    """
    snapshot = event.snapshot
    title = TITLES[event.kind]
    rendered_at = now if now is not None else datetime.now(tz)
    if rendered_at.tzinfo is not None:
        rendered_at = rendered_at.astimezone(tz)

    lines = [
        f"## Tesla {title}{_LINE_END}",
        _detail("Car", snapshot.car_name),
        _detail("State", snapshot.state),
        _detail("Battery", f"{snapshot.battery_level}%"),
    ]
    if snapshot.plugged_in:
        lines.append(_detail("Plugged in", "yes"))
    if snapshot.charger_actual_current != 0:
        lines.append(_detail("Charger current", f"{snapshot.charger_actual_current}A"))
    if snapshot.charger_power != 0:
        lines.append(_detail("Charger power", f"{snapshot.charger_power}kW"))
    if snapshot.time_to_full_charge != 0:
        lines.append(_detail("Time to full", f"{snapshot.minutes_to_full_charge} min"))
    lines.append(_detail("State since", format_state_since(snapshot.state_since, tz)))
    lines.append(f"###### {rendered_at.strftime(DISPLAY_TIME_FORMAT)} \n  ")

    return RenderedMessage(title=title, body="".join(lines))
