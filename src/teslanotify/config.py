"""Monitor configuration for teslanotify."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable
from typing import Any

from teslanotify._constants import DEFAULT_CAR_ID, DEFAULT_POLL_INTERVAL, DEFAULT_REQUEST_TIMEOUT
from teslanotify.exceptions import TeslaConfigError


def _env_number(env_key: str, value: str, convert: Callable[[str], Any]) -> Any:
    try:
        return convert(value.strip())
    except ValueError as exc:
        raise TeslaConfigError(f"{env_key} must be numeric, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class NotifyConfig:
    """Monitor configuration.

    Parameters
    ----------
    api_url : str
        Base URL of the TeslaMate API server, e.g.
        ``https://teslamate.example.com/api``. Empty when unset; requests
        then fail at fetch time.
    webhook_url : str
        DingTalk robot webhook, including its ``access_token`` query.
    webhook_secret : str or None
        Signing secret for DingTalk robots with the "sign" security setting.
    car_id : int
        TeslaMate car id to poll.
    poll_interval : float
        Seconds between the start of two poll cycles.
    request_timeout : float
        Total timeout in seconds for each HTTP request.
    time_zone : str or None
        IANA zone used when rendering timestamps. ``None`` uses the
        system local zone.
    """

    api_url: str = ""
    webhook_url: str = ""
    webhook_secret: str | None = None
    car_id: int = DEFAULT_CAR_ID
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    time_zone: str | None = None

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise TeslaConfigError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.request_timeout <= 0:
            raise TeslaConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> NotifyConfig:
        """Create configuration from environment variables.

        Reads ``TESLA_API_URL`` and ``NOTIFY_DINGROBOT_WEBHOOK`` plus the
        optional tuning variables. Explicit keyword arguments override
        environment values.

        Raises
        ------
        TeslaConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "TESLA_API_URL": "api_url",
            "NOTIFY_DINGROBOT_WEBHOOK": "webhook_url",
            "NOTIFY_DINGROBOT_SECRET": "webhook_secret",
            "TESLA_NOTIFY_TIMEZONE": "time_zone",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip()

        # Empty optional values mean "not configured"
        for field_name in ("webhook_secret", "time_zone"):
            if config_kwargs.get(field_name) == "":
                config_kwargs.pop(field_name)

        _ENV_NUMERIC_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
            "TESLA_CAR_ID": ("car_id", int),
            "TESLA_NOTIFY_INTERVAL": ("poll_interval", float),
            "TESLA_NOTIFY_TIMEOUT": ("request_timeout", float),
        }
        for env_key, (field_name, convert) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is not None and val.strip() and field_name not in overrides:
                config_kwargs[field_name] = _env_number(env_key, val, convert)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
