from __future__ import annotations

from typing import Any

from .base import Service, query_params


class WebhooksService(Service):
    """Webhook endpoint registration. Signature checks live in ``xrplsale.webhook``."""

    async def list(self) -> Any:
        return await self._client.get("/webhooks")

    async def get(self, webhook_id: str) -> dict[str, Any]:
        return await self._client.get(f"/webhooks/{webhook_id}")

    async def create(self, url: str, events: list[str], *, secret: str | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"url": url, "events": events}
        if secret:
            body["secret"] = secret
        return await self._client.post("/webhooks", body)

    async def update(self, webhook_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return await self._client.patch(f"/webhooks/{webhook_id}", changes)

    async def delete(self, webhook_id: str) -> Any:
        return await self._client.delete(f"/webhooks/{webhook_id}")

    async def test(self, webhook_id: str) -> dict[str, Any]:
        return await self._client.post(f"/webhooks/{webhook_id}/test")

    async def deliveries(
            self,
            webhook_id: str,
            *,
            page: int | None = None,
            limit: int | None = None,
    ) -> dict[str, Any]:
        return await self._client.get(f"/webhooks/{webhook_id}/deliveries", query_params(page=page, limit=limit))
