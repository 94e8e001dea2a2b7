from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import ConfigurationError

SDK_VERSION = "1.0.0"


def user_agent() -> str:
    return f"XRPL.Sale-Python-SDK/{SDK_VERSION}"


class Environment(enum.Enum):
    PRODUCTION = "production"
    TESTNET = "testnet"

    @property
    def base_url(self) -> str:
        if self is Environment.TESTNET:
            return "https://api-testnet.xrpl.sale/v1"
        return "https://api.xrpl.sale/v1"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Environment:
        key = (value or "").strip().lower()
        if key in {"production", "prod"}:
            return cls.PRODUCTION
        if key in {"testnet", "test"}:
            return cls.TESTNET
        raise ConfigurationError(f"Invalid environment: {value}")


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    environment: Environment = Environment.PRODUCTION
    base_url: str | None = None
    timeout_s: float = 30.0
    max_retries: int = 3
    retry_delay_s: float = 1.0
    webhook_secret: str | None = None
    debug: bool = False

    @property
    def resolved_base_url(self) -> str:
        return self.base_url or self.environment.base_url
