from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..client import XrplSaleClient


def query_params(**values: Any) -> dict[str, str] | None:
    """Drop unset values and stringify the rest; None when nothing is left."""
    params = {k: str(v) for k, v in values.items() if v is not None}
    return params or None


def list_data(envelope: Any) -> list[Any]:
    if isinstance(envelope, dict) and isinstance(envelope.get("data"), list):
        return envelope["data"]
    return []


class Service:
    def __init__(self, client: XrplSaleClient):
        self._client = client
