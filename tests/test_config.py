from __future__ import annotations

import pytest

from teslanotify.config import NotifyConfig
from teslanotify.exceptions import TeslaConfigError

_ENV_KEYS = (
    "TESLA_API_URL",
    "NOTIFY_DINGROBOT_WEBHOOK",
    "NOTIFY_DINGROBOT_SECRET",
    "TESLA_CAR_ID",
    "TESLA_NOTIFY_INTERVAL",
    "TESLA_NOTIFY_TIMEOUT",
    "TESLA_NOTIFY_TIMEZONE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_from_env_defaults_to_empty_urls() -> None:
    config = NotifyConfig.from_env()

    assert config.api_url == ""
    assert config.webhook_url == ""
    assert config.webhook_secret is None
    assert config.car_id == 1
    assert config.poll_interval == 60.0
    assert config.time_zone is None


def test_from_env_reads_urls_and_strips_trailing_slash(monkeypatch) -> None:
    monkeypatch.setenv("TESLA_API_URL", "https://teslamate.example.com/api/")
    monkeypatch.setenv("NOTIFY_DINGROBOT_WEBHOOK", "https://oapi.dingtalk.com/robot/send?access_token=abc")
    monkeypatch.setenv("NOTIFY_DINGROBOT_SECRET", "SECxyz")

    config = NotifyConfig.from_env()

    assert config.api_url == "https://teslamate.example.com/api"
    assert config.webhook_url == "https://oapi.dingtalk.com/robot/send?access_token=abc"
    assert config.webhook_secret == "SECxyz"


def test_from_env_numeric_values(monkeypatch) -> None:
    monkeypatch.setenv("TESLA_CAR_ID", "2")
    monkeypatch.setenv("TESLA_NOTIFY_INTERVAL", "30")
    monkeypatch.setenv("TESLA_NOTIFY_TIMEOUT", "5.5")

    config = NotifyConfig.from_env()

    assert config.car_id == 2
    assert config.poll_interval == 30.0
    assert config.request_timeout == 5.5


def test_from_env_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv("TESLA_NOTIFY_INTERVAL", "30")
    monkeypatch.setenv("TESLA_API_URL", "https://env.example.com")

    config = NotifyConfig.from_env(poll_interval=10.0, api_url="https://override.example.com")

    assert config.poll_interval == 10.0
    assert config.api_url == "https://override.example.com"


def test_from_env_blank_secret_is_unset(monkeypatch) -> None:
    monkeypatch.setenv("NOTIFY_DINGROBOT_SECRET", "  ")

    assert NotifyConfig.from_env().webhook_secret is None


def test_from_env_rejects_non_numeric_interval(monkeypatch) -> None:
    monkeypatch.setenv("TESLA_NOTIFY_INTERVAL", "every minute")

    with pytest.raises(TeslaConfigError, match="TESLA_NOTIFY_INTERVAL"):
        NotifyConfig.from_env()


def test_rejects_non_positive_interval() -> None:
    with pytest.raises(TeslaConfigError):
        NotifyConfig(poll_interval=0)
