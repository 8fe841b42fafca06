"""teslanotify - Charge state notifications from TeslaMate to DingTalk."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("teslanotify")
except PackageNotFoundError:
    __version__ = "0+local"
from teslanotify.config import NotifyConfig
from teslanotify.detector import detect_transitions
from teslanotify.exceptions import (
    DecodeError,
    DeliveryError,
    FetchError,
    TeslaConfigError,
    TeslaNotifyError,
)
from teslanotify.fetcher import TelemetryFetcher
from teslanotify.models import EventKind, NotificationEvent, Snapshot, parse_status_response
from teslanotify.monitor import ChargeMonitor
from teslanotify.notifier import DingTalkNotifier
from teslanotify.render import RenderedMessage, format_state_since, render_event

__all__ = [
    "__version__",
    "ChargeMonitor",
    "DecodeError",
    "DeliveryError",
    "DingTalkNotifier",
    "EventKind",
    "FetchError",
    "NotificationEvent",
    "NotifyConfig",
    "RenderedMessage",
    "Snapshot",
    "TelemetryFetcher",
    "TeslaConfigError",
    "TeslaNotifyError",
    "detect_transitions",
    "format_state_since",
    "parse_status_response",
    "render_event",
]
