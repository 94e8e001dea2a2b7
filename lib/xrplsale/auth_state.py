from __future__ import annotations

import asyncio


class TokenStore:
    """Session bearer token shared by every request of one client.

    When a token is set it replaces the static API key header.
    """

    def __init__(self, token: str | None = None) -> None:
        self._token = token
        self._lock = asyncio.Lock()

    async def get(self) -> str | None:
        async with self._lock:
            return self._token

    async def set(self, token: str | None) -> None:
        async with self._lock:
            self._token = token or None

    async def clear(self) -> None:
        await self.set(None)
