"""Helpers for safe debug logging.

Webhook URLs embed their credentials (``access_token``, ``sign``) in the
query string. :func:`redact_url` strips them before a URL is logged.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SENSITIVE_QUERY_KEYS: frozenset[str] = frozenset(
    {
        "access_token",
        "token",
        "sign",
        "secret",
    }
)


def redact_url(url: str) -> str:
    """Return *url* with sensitive query parameter values replaced."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (key, "<redacted>" if key.lower() in _SENSITIVE_QUERY_KEYS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="<>")))
