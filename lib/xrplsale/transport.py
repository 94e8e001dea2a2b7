from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Mapping

import httpx

from .auth_state import TokenStore
from .config import check_url
from .config_types import ClientConfig, user_agent
from .errors import ParseError, TransportError, error_for_status

log = logging.getLogger(__name__)


class Transport:
    def __init__(
            self,
            cfg: ClientConfig,
            token_store: TokenStore | None = None,
            *,
            http_client: httpx.AsyncClient | None = None,
    ):
        self._cfg = cfg
        self._tokens = token_store or TokenStore()
        self._headers = {
            "Accept": "application/json",
            "User-Agent": user_agent(),
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=cfg.timeout_s,
            headers=self._headers,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def build_url(self, path: str) -> str:
        base = self._cfg.resolved_base_url
        check_url(base, "Invalid base URL")
        rel = path[1:] if path.startswith("/") else path
        url = f"{base.rstrip('/')}/{rel}"
        check_url(url, "Invalid path")
        return url

    async def _request_headers(self) -> dict[str, str]:
        headers = dict(self._headers)
        token = await self._tokens.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        else:
            headers["X-API-Key"] = self._cfg.api_key
        return headers

    async def request(
            self,
            method: str,
            path: str,
            *,
            params: Mapping[str, Any] | None = None,
            json_body: Any | None = None,
    ) -> Any:
        url = self.build_url(path)
        headers = await self._request_headers()
        query = [(k, str(v)) for k, v in params.items()] if params else None

        response: httpx.Response | None = None
        last_exc: httpx.TransportError | None = None
        for attempt in range(self._cfg.max_retries + 1):
            try:
                response = await self._client.request(
                    method,
                    url,
                    params=query,
                    json=json_body,
                    headers=headers,
                )
                break
            except httpx.TransportError as e:
                last_exc = e
                if attempt < self._cfg.max_retries:
                    delay = self._cfg.retry_delay_s * (2 ** attempt)
                    if self._cfg.debug:
                        log.debug("Request failed, retrying in %.2fs: %s", delay, e)
                    await asyncio.sleep(delay)

        if response is None:
            raise TransportError(f"{method} {url} failed: {last_exc}") from last_exc

        if self._cfg.debug:
            log.debug("HTTP %s %s -> %s", method, response.request.url, response.status_code)
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        text = response.text
        if response.is_success:
            if not text.strip():
                return None
            try:
                return json.loads(text)
            except ValueError as e:
                if self._cfg.debug:
                    log.debug("Failed to parse response: %s", text)
                raise ParseError(f"Invalid JSON response: {e}", body=text) from e

        raise error_for_status(
            response.status_code,
            text,
            url=str(response.request.url),
            headers=response.headers,
        )

