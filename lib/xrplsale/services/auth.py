from __future__ import annotations

from typing import Any

from ..errors import ApiError
from .base import Service


def _extract_token(data: Any) -> str:
    if isinstance(data, dict):
        token = data.get("token") or data.get("access_token")
        if isinstance(token, str) and token:
            return token
    raise ApiError(500, "auth response returned no token")


class AuthService(Service):
    """XRPL wallet authentication.

    ``authenticate`` and ``refresh`` store the returned session token on the
    client, so later requests send ``Authorization: Bearer`` instead of the
    API key. ``logout`` clears it.
    """

    async def challenge(self, wallet_address: str) -> dict[str, Any]:
        return await self._client.post("/auth/challenge", {"wallet_address": wallet_address})

    async def authenticate(self, wallet_address: str, signature: str, timestamp: int | str) -> dict[str, Any]:
        body = {
            "wallet_address": wallet_address,
            "signature": signature,
            "timestamp": timestamp,
        }
        data = await self._client.post("/auth/wallet", body)
        await self._client.set_auth_token(_extract_token(data))
        return data

    async def refresh(self) -> dict[str, Any]:
        data = await self._client.post("/auth/refresh")
        await self._client.set_auth_token(_extract_token(data))
        return data

    async def logout(self) -> None:
        await self._client.post("/auth/logout")
        await self._client.set_auth_token(None)

    async def me(self) -> dict[str, Any]:
        return await self._client.get("/auth/me")
