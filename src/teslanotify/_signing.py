"""Request signing for DingTalk robots with the "sign" security setting."""

from __future__ import annotations

import base64
import hashlib
import hmac


def build_sign(timestamp_ms: int, secret: str) -> str:
    """Compute the ``sign`` query parameter value.

    Algorithm (DingTalk custom robot security settings):
      1. Build the string ``"{timestamp}\\n{secret}"``
      2. HMAC-SHA256 it keyed with the secret
      3. Base64-encode the digest

    The result is URL-encoded by the HTTP client when sent as a query
    parameter.

    Parameters
    ----------
    timestamp_ms : int
        Current epoch time in milliseconds; DingTalk rejects values more
        than one hour off.
    secret : str
        The robot's ``SEC...`` signing secret.

    Returns
    -------
    str
        Base64 signature.
    """
    string_to_sign = f"{timestamp_ms}\n{secret}"
    digest = hmac.new(secret.encode("utf-8"), string_to_sign.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def signature_params(secret: str, timestamp_ms: int) -> dict[str, str]:
    """Query parameters to add to a signed robot webhook request."""
    return {"timestamp": str(timestamp_ms), "sign": build_sign(timestamp_ms, secret)}
