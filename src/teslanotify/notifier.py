"""Notification delivery through a DingTalk robot webhook."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import Callable
from typing import Any, Protocol

import aiohttp

from teslanotify._redact import redact_url
from teslanotify._signing import signature_params
from teslanotify.config import NotifyConfig
from teslanotify.exceptions import DeliveryError

_logger = logging.getLogger(__name__)


def _now_ms() -> int:
    """Current epoch timestamp in milliseconds."""
    return int(time.time() * 1000)


class Notifier(Protocol):
    async def send(self, title: str, text: str) -> None:
        ...


def build_markdown_message(title: str, text: str) -> dict[str, Any]:
    return {
        "msgtype": "markdown",
        "markdown": {
            "title": title,
            "text": text,
        },
    }


class DingTalkNotifier:
    """Posts markdown messages to a DingTalk custom robot."""

    def __init__(
        self,
        config: NotifyConfig,
        http_session: aiohttp.ClientSession,
        *,
        clock_ms: Callable[[], int] = _now_ms,
    ) -> None:
        self._config = config
        self._http = http_session
        self._clock_ms = clock_ms

    async def send(self, title: str, text: str) -> None:
        """Deliver one message.

        Raises
        ------
        DeliveryError
            Transport failure, non-200 status, or a non-zero ``errcode``
            in the robot's reply.
        """
        url = self._config.webhook_url
        params: dict[str, str] = {}
        if self._config.webhook_secret:
            params = signature_params(self._config.webhook_secret, self._clock_ms())
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)

        _logger.debug("POST %s title=%r", redact_url(url), title)

        try:
            async with self._http.post(
                url,
                json=build_markdown_message(title, text),
                params=params or None,
                timeout=timeout,
            ) as resp:
                body = await resp.text()
                if resp.status != 200:
                    raise DeliveryError(
                        f"HTTP {resp.status} from webhook: {body[:200]}",
                        status_code=resp.status,
                    )
        except DeliveryError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise DeliveryError(f"Request to {redact_url(url)} failed: {exc!r}") from exc

        _logger.debug("Webhook response: %s", body[:512])

        try:
            reply = json.loads(body)
        except json.JSONDecodeError:
            return
        if not isinstance(reply, dict):
            return
        try:
            errcode = int(reply.get("errcode", 0))
        except (TypeError, ValueError):
            errcode = -1
        if errcode != 0:
            raise DeliveryError(
                f"Webhook rejected message: errcode={errcode} errmsg={reply.get('errmsg', '')}",
                status_code=200,
                errcode=errcode,
            )
