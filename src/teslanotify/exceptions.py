"""Custom exception hierarchy for teslanotify."""

from __future__ import annotations


class TeslaNotifyError(Exception):
    """Base exception for all teslanotify errors."""


class TeslaConfigError(TeslaNotifyError):
    """Invalid configuration value."""


class FetchError(TeslaNotifyError):
    """Telemetry request failed (network, timeout, non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class DecodeError(TeslaNotifyError):
    """Telemetry payload is not valid JSON or does not match the status schema.

    Raised instead of returning a partially populated snapshot: a decode
    either yields a complete :class:`~teslanotify.models.Snapshot` or fails.
    """


class DeliveryError(TeslaNotifyError):
    """Notification could not be delivered to the webhook.

    ``errcode`` carries the DingTalk application error code when the robot
    answered HTTP 200 but rejected the message (e.g. ``310000`` for a bad
    signature, ``130101`` when rate limited).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errcode: int | None = None,
    ) -> None:
        self.status_code = status_code
        self.errcode = errcode
        super().__init__(message)
