from __future__ import annotations

import hashlib
import hmac
import json
from dataclasses import dataclass, field
from typing import Any

from .errors import ParseError, WebhookSignatureError

SIGNATURE_HEADER = "X-XRPL-Sale-Signature"
_PREFIX = "sha256="


@dataclass(frozen=True)
class WebhookEvent:
    id: str
    type: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: str | None = None


def _as_bytes(payload: bytes | str) -> bytes:
    return payload.encode("utf-8") if isinstance(payload, str) else payload


class WebhookSignatureValidator:
    def __init__(self, secret: str):
        self._secret = secret.encode("utf-8")

    def sign(self, payload: bytes | str) -> str:
        return hmac.new(self._secret, _as_bytes(payload), hashlib.sha256).hexdigest()

    def verify(self, payload: bytes | str, signature: str | None) -> bool:
        """True when ``signature`` (hex, optionally ``sha256=``-prefixed) matches."""
        sig = (signature or "").strip()
        if sig.lower().startswith(_PREFIX):
            sig = sig[len(_PREFIX):]
        if not sig:
            return False
        return hmac.compare_digest(sig.lower().encode("utf-8"), self.sign(payload).encode("ascii"))

    def verify_or_raise(self, payload: bytes | str, signature: str | None) -> None:
        if not self.verify(payload, signature):
            raise WebhookSignatureError("Invalid webhook signature")


def parse_event(payload: bytes | str) -> WebhookEvent:
    try:
        data = json.loads(_as_bytes(payload))
    except ValueError as e:
        raise ParseError(f"Invalid webhook payload: {e}") from e
    if not isinstance(data, dict) or not data.get("id") or not data.get("type"):
        raise ParseError("Webhook payload must be an object with 'id' and 'type'")
    body = data.get("data")
    return WebhookEvent(
        id=str(data["id"]),
        type=str(data["type"]),
        data=body if isinstance(body, dict) else {},
        timestamp=data.get("timestamp"),
    )
