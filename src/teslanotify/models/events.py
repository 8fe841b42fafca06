"""Notification events produced by the transition detector."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from teslanotify.models.snapshot import Snapshot


class EventKind(StrEnum):
    STARTED_MONITORING = "started_monitoring"
    PLUG_CONNECTED = "plug_connected"
    CHARGING_STARTED = "charging_started"
    CHARGING_STOPPED = "charging_stopped"
    PLUG_DISCONNECTED = "plug_disconnected"
    CHARGING_COMPLETE = "charging_complete"
    CHARGING_ALMOST_COMPLETE = "charging_almost_complete"


class NotificationEvent(BaseModel):
    """A detected transition together with the snapshot that triggered it."""

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    snapshot: Snapshot
