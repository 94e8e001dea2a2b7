from __future__ import annotations

from typing import Any, Mapping

import httpx

from .auth_state import TokenStore
from .config import ClientBuilder
from .config_types import ClientConfig
from .services import AnalyticsService, AuthService, InvestmentsService, ProjectsService, WebhooksService
from .transport import Transport
from .webhook import WebhookSignatureValidator


class XrplSaleClient:
    """Async client for the XRPL.Sale REST API.

    Build one with ``XrplSaleClient.builder().api_key("...").build()`` and
    close it with ``await client.aclose()`` (or use ``async with``).
    """

    def __init__(self, cfg: ClientConfig, *, http_client: httpx.AsyncClient | None = None):
        self._cfg = cfg
        self._tokens = TokenStore()
        self._t = Transport(cfg, self._tokens, http_client=http_client)

        self.projects = ProjectsService(self)
        self.investments = InvestmentsService(self)
        self.analytics = AnalyticsService(self)
        self.webhooks = WebhooksService(self)
        self.auth = AuthService(self)

    @staticmethod
    def builder() -> ClientBuilder:
        return ClientBuilder()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def base_url(self) -> str:
        return self._cfg.resolved_base_url

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> XrplSaleClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def set_auth_token(self, token: str | None) -> None:
        await self._tokens.set(token)

    async def get_auth_token(self) -> str | None:
        return await self._tokens.get()

    def webhook_validator(self) -> WebhookSignatureValidator | None:
        if not self._cfg.webhook_secret:
            return None
        return WebhookSignatureValidator(self._cfg.webhook_secret)

    # --- HTTP verbs ---
    async def request(
            self,
            method: str,
            path: str,
            *,
            params: Mapping[str, Any] | None = None,
            body: Any | None = None,
    ) -> Any:
        return await self._t.request(method.upper(), path, params=params, json_body=body)

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._t.request("GET", path, params=params)

    async def post(self, path: str, body: Any | None = None) -> Any:
        return await self._t.request("POST", path, json_body=body)

    async def put(self, path: str, body: Any | None = None) -> Any:
        return await self._t.request("PUT", path, json_body=body)

    async def patch(self, path: str, body: Any | None = None) -> Any:
        return await self._t.request("PATCH", path, json_body=body)

    async def delete(self, path: str) -> Any:
        return await self._t.request("DELETE", path)
