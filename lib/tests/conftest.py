from __future__ import annotations

import types

import pytest

from xrplsale import transport

from _http_fakes import Recorder


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def sleeps(monkeypatch) -> list[float]:
    """Backoff delays requested by the transport, recorded instead of slept."""
    delays: list[float] = []

    async def _sleep(delay: float) -> None:
        delays.append(delay)

    monkeypatch.setattr(transport, "asyncio", types.SimpleNamespace(sleep=_sleep))
    return delays
