from __future__ import annotations

from typing import Any

from .base import Service, query_params


class AnalyticsService(Service):
    async def platform(self, *, period: str | None = None) -> dict[str, Any]:
        return await self._client.get("/analytics/platform", query_params(period=period))

    async def project(self, project_id: str, *, period: str | None = None) -> dict[str, Any]:
        return await self._client.get(f"/analytics/projects/{project_id}", query_params(period=period))

    async def investor(self, investor_account: str, *, period: str | None = None) -> dict[str, Any]:
        return await self._client.get(f"/analytics/investors/{investor_account}", query_params(period=period))

    async def market_trends(self, *, period: str | None = None) -> dict[str, Any]:
        return await self._client.get("/analytics/market-trends", query_params(period=period))

    async def export(
            self,
            data_type: str,
            *,
            start_date: str | None = None,
            end_date: str | None = None,
            format: str = "json",
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"data_type": data_type, "format": format}
        if start_date:
            body["start_date"] = start_date
        if end_date:
            body["end_date"] = end_date
        return await self._client.post("/analytics/export", body)
