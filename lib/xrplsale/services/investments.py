from __future__ import annotations

from typing import Any, AsyncIterator

from ..pagination import DEFAULT_PAGE_SIZE, paginate
from .base import Service, query_params


class InvestmentsService(Service):
    async def list(
            self,
            *,
            project_id: str | None = None,
            investor_account: str | None = None,
            status: str | None = None,
            page: int | None = None,
            limit: int | None = None,
    ) -> dict[str, Any]:
        params = query_params(
            project_id=project_id,
            investor_account=investor_account,
            status=status,
            page=page,
            limit=limit,
        )
        return await self._client.get("/investments", params)

    async def get(self, investment_id: str) -> dict[str, Any]:
        return await self._client.get(f"/investments/{investment_id}")

    async def create(self, investment: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/investments", investment)

    async def by_project(
            self,
            project_id: str,
            *,
            page: int | None = None,
            limit: int | None = None,
    ) -> dict[str, Any]:
        return await self._client.get(f"/projects/{project_id}/investments", query_params(page=page, limit=limit))

    async def by_investor(
            self,
            investor_account: str,
            *,
            page: int | None = None,
            limit: int | None = None,
    ) -> dict[str, Any]:
        return await self._client.get(
            f"/investors/{investor_account}/investments",
            query_params(page=page, limit=limit),
        )

    async def simulate(self, request: dict[str, Any]) -> dict[str, Any]:
        """Dry-run an investment: token amount, tier and fees without submitting."""
        return await self._client.post("/investments/simulate", request)

    def stream_all(self, project_id: str | None = None) -> AsyncIterator[dict[str, Any]]:
        async def fetch(page: int, limit: int) -> dict[str, Any]:
            return await self.list(project_id=project_id, page=page, limit=limit)

        return paginate(fetch, page_size=DEFAULT_PAGE_SIZE)
