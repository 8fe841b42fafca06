"""Charge state transition detection.

This module contains *no* I/O. It compares two decoded snapshots and
decides which notifications are due; fetching, rendering and delivery
live elsewhere.
"""

from __future__ import annotations

from teslanotify._constants import ALMOST_COMPLETE_SECONDS
from teslanotify.models.events import EventKind, NotificationEvent
from teslanotify.models.snapshot import Snapshot


def _transition_kinds(previous: Snapshot, current: Snapshot) -> list[EventKind]:
    kinds: list[EventKind] = []
    if not previous.plugged_in and current.plugged_in:
        kinds.append(EventKind.PLUG_CONNECTED)
    if not previous.is_charging and current.is_charging:
        kinds.append(EventKind.CHARGING_STARTED)
    if previous.is_charging and not current.is_charging:
        kinds.append(EventKind.CHARGING_STOPPED)
    if previous.plugged_in and not current.plugged_in:
        kinds.append(EventKind.PLUG_DISCONNECTED)
    return kinds


def _completion_kind(current: Snapshot) -> EventKind | None:
    """Remaining-time check, evaluated on every poll while plugged in.

    The "almost complete" trigger only matches exactly five minutes left;
    a poll landing at 299 or 301 seconds emits nothing.
    """
    if not current.plugged_in:
        return None
    seconds = current.seconds_to_full_charge
    if seconds <= 0:
        return EventKind.CHARGING_COMPLETE
    if seconds == ALMOST_COMPLETE_SECONDS:
        return EventKind.CHARGING_ALMOST_COMPLETE
    return None


def detect_transitions(previous: Snapshot | None, current: Snapshot) -> list[NotificationEvent]:
    """Return the notifications due for *current* given *previous*.

    Order:
    - No previous snapshot: ``STARTED_MONITORING`` only.
    - Otherwise plug connected, charging started, charging stopped and plug
      disconnected (every match fires), followed by at most one of charging
      complete / almost complete.
    """
    if previous is None:
        return [NotificationEvent(kind=EventKind.STARTED_MONITORING, snapshot=current)]

    kinds = _transition_kinds(previous, current)
    completion = _completion_kind(current)
    if completion is not None:
        kinds.append(completion)
    return [NotificationEvent(kind=kind, snapshot=current) for kind in kinds]
