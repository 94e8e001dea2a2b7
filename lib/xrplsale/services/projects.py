from __future__ import annotations

from typing import Any, AsyncIterator

from ..pagination import DEFAULT_PAGE_SIZE, paginate
from .base import Service, list_data, query_params


class ProjectsService(Service):
    """Token sale projects: listing, lifecycle actions, tiers and stats."""

    async def list(
            self,
            *,
            status: str | None = None,
            page: int | None = None,
            limit: int | None = None,
            sort_by: str | None = None,
            sort_order: str | None = None,
    ) -> dict[str, Any]:
        params = query_params(status=status, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)
        return await self._client.get("/projects", params)

    async def active(self, *, page: int | None = None, limit: int | None = None) -> dict[str, Any]:
        return await self.list(status="active", page=page, limit=limit)

    async def upcoming(self, *, page: int | None = None, limit: int | None = None) -> dict[str, Any]:
        return await self.list(status="upcoming", page=page, limit=limit)

    async def completed(self, *, page: int | None = None, limit: int | None = None) -> dict[str, Any]:
        return await self.list(status="completed", page=page, limit=limit)

    async def get(self, project_id: str) -> dict[str, Any]:
        return await self._client.get(f"/projects/{project_id}")

    async def create(self, project: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("/projects", project)

    async def update(self, project_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return await self._client.patch(f"/projects/{project_id}", changes)

    async def launch(self, project_id: str) -> dict[str, Any]:
        return await self._client.post(f"/projects/{project_id}/launch")

    async def pause(self, project_id: str) -> dict[str, Any]:
        return await self._client.post(f"/projects/{project_id}/pause")

    async def resume(self, project_id: str) -> dict[str, Any]:
        return await self._client.post(f"/projects/{project_id}/resume")

    async def cancel(self, project_id: str) -> dict[str, Any]:
        return await self._client.post(f"/projects/{project_id}/cancel")

    async def stats(self, project_id: str) -> dict[str, Any]:
        return await self._client.get(f"/projects/{project_id}/stats")

    async def investors(
            self,
            project_id: str,
            *,
            page: int | None = None,
            limit: int | None = None,
    ) -> dict[str, Any]:
        return await self._client.get(f"/projects/{project_id}/investors", query_params(page=page, limit=limit))

    async def tiers(self, project_id: str) -> list[dict[str, Any]]:
        return await self._client.get(f"/projects/{project_id}/tiers")

    async def update_tiers(self, project_id: str, tiers: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return await self._client.put(f"/projects/{project_id}/tiers", {"tiers": tiers})

    async def search(
            self,
            q: str,
            *,
            status: str | None = None,
            page: int | None = None,
            limit: int | None = None,
    ) -> dict[str, Any]:
        params = query_params(q=q, status=status, page=page, limit=limit)
        return await self._client.get("/projects/search", params)

    async def featured(self, *, limit: int | None = None) -> list[dict[str, Any]]:
        data = await self._client.get("/projects/featured", query_params(limit=limit))
        return list_data(data)

    async def trending(self, *, period: str | None = None, limit: int | None = None) -> list[dict[str, Any]]:
        data = await self._client.get("/projects/trending", query_params(period=period, limit=limit))
        return list_data(data)

    def stream_all(self, status: str | None = None) -> AsyncIterator[dict[str, Any]]:
        """Every project matching ``status``, fetched page by page on demand."""

        async def fetch(page: int, limit: int) -> dict[str, Any]:
            return await self.list(status=status, page=page, limit=limit)

        return paginate(fetch, page_size=DEFAULT_PAGE_SIZE)
