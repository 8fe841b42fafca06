"""Data models for telemetry snapshots and notification events."""

from teslanotify.models.events import EventKind, NotificationEvent
from teslanotify.models.snapshot import Snapshot, parse_status_response

__all__ = [
    "EventKind",
    "NotificationEvent",
    "Snapshot",
    "parse_status_response",
]
