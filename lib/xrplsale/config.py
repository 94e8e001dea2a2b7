from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any, Mapping

import httpx
from platformdirs import user_config_dir

from .config_types import ClientConfig, Environment
from .errors import ConfigurationError

if TYPE_CHECKING:
    from .client import XrplSaleClient

APP_NAME = "xrplsale"
CONFIG_FILENAME = "config.toml"

ENV_API_KEY = "XRPLSALE_API_KEY"
ENV_ENVIRONMENT = "XRPLSALE_ENVIRONMENT"
ENV_BASE_URL = "XRPLSALE_BASE_URL"
ENV_TIMEOUT = "XRPLSALE_TIMEOUT"
ENV_MAX_RETRIES = "XRPLSALE_MAX_RETRIES"
ENV_RETRY_DELAY = "XRPLSALE_RETRY_DELAY"
ENV_WEBHOOK_SECRET = "XRPLSALE_WEBHOOK_SECRET"
ENV_DEBUG = "XRPLSALE_DEBUG"

_ENV_SETTINGS = {
    "api_key": ENV_API_KEY,
    "environment": ENV_ENVIRONMENT,
    "base_url": ENV_BASE_URL,
    "timeout_s": ENV_TIMEOUT,
    "max_retries": ENV_MAX_RETRIES,
    "retry_delay_s": ENV_RETRY_DELAY,
    "webhook_secret": ENV_WEBHOOK_SECRET,
    "debug": ENV_DEBUG,
}
SETTING_KEYS = tuple(_ENV_SETTINGS)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def check_url(url: str, what: str) -> None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"{what}: {e}") from e
    if parsed.scheme not in {"http", "https"} or not parsed.host:
        raise ConfigurationError(f"{what}: {url}")


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    if any(ch.isspace() for ch in value):
        raise ConfigurationError(f"Invalid base URL: {value!r}")
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"
    return f"{scheme}{value}"


def load_config(path: str | None = None, *, profile: str | None = None) -> dict[str, Any]:
    """Read client settings from a TOML file.

    A missing file yields no settings. When ``profile`` is given, the matching
    ``[profiles.<name>]`` table is layered over the top-level keys.
    """
    file_path = path or config_path()
    if not os.path.exists(file_path):
        if profile:
            raise ConfigurationError(f"Unknown profile: {profile}")
        return {}
    try:
        with open(file_path, "rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file {file_path}: {e}") from e

    settings = {k: data[k] for k in SETTING_KEYS if k in data}
    if profile:
        profiles = data.get("profiles") or {}
        prof = profiles.get(profile) if isinstance(profiles, dict) else None
        if not isinstance(prof, dict):
            raise ConfigurationError(f"Unknown profile: {profile}")
        settings.update({k: prof[k] for k in SETTING_KEYS if k in prof})
    return settings


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    env = os.environ if environ is None else environ
    out: dict[str, str] = {}
    for key, var in _ENV_SETTINGS.items():
        raw = env.get(var)
        if raw is None or not raw.strip():
            continue
        out[key] = raw.strip()
    return out


def _as_float(key: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be a number, got {value!r}") from e


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from e


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


class ClientBuilder:
    def __init__(self) -> None:
        self._api_key = ""
        self._environment = Environment.PRODUCTION
        self._base_url: str | None = None
        self._timeout_s = 30.0
        self._max_retries = 3
        self._retry_delay_s = 1.0
        self._webhook_secret: str | None = None
        self._debug = False

    @classmethod
    def from_env(
            cls,
            path: str | None = None,
            *,
            profile: str | None = None,
            environ: Mapping[str, str] | None = None,
    ) -> ClientBuilder:
        """Builder seeded from the config file, then environment variables."""
        settings = load_config(path, profile=profile)
        settings.update(env_overrides(environ))
        return cls().apply(settings)

    def apply(self, settings: Mapping[str, Any]) -> ClientBuilder:
        if "api_key" in settings:
            self.api_key(str(settings["api_key"] or ""))
        if "environment" in settings:
            self.environment(str(settings["environment"]))
        if settings.get("base_url"):
            self.base_url(str(settings["base_url"]))
        if "timeout_s" in settings:
            self.timeout(_as_float("timeout_s", settings["timeout_s"]))
        if "max_retries" in settings:
            self.max_retries(_as_int("max_retries", settings["max_retries"]))
        if "retry_delay_s" in settings:
            self.retry_delay(_as_float("retry_delay_s", settings["retry_delay_s"]))
        if settings.get("webhook_secret"):
            self.webhook_secret(str(settings["webhook_secret"]))
        if "debug" in settings:
            self.debug(_as_bool(settings["debug"]))
        return self

    def api_key(self, api_key: str) -> ClientBuilder:
        self._api_key = api_key
        return self

    def environment(self, environment: Environment | str) -> ClientBuilder:
        if not isinstance(environment, Environment):
            environment = Environment.parse(environment)
        self._environment = environment
        return self

    def base_url(self, base_url: str) -> ClientBuilder:
        normalized = normalize_base_url(base_url)
        if normalized:
            check_url(normalized, "Invalid base URL")
        self._base_url = normalized or None
        return self

    def timeout(self, timeout_s: float) -> ClientBuilder:
        self._timeout_s = timeout_s
        return self

    def max_retries(self, max_retries: int) -> ClientBuilder:
        self._max_retries = max_retries
        return self

    def retry_delay(self, retry_delay_s: float) -> ClientBuilder:
        self._retry_delay_s = retry_delay_s
        return self

    def webhook_secret(self, secret: str) -> ClientBuilder:
        self._webhook_secret = secret
        return self

    def debug(self, debug: bool = True) -> ClientBuilder:
        self._debug = debug
        return self

    def build_config(self) -> ClientConfig:
        if not (self._api_key or "").strip():
            raise ConfigurationError("API key is required")
        if self._max_retries < 0:
            raise ConfigurationError("max_retries must be >= 0")
        if self._timeout_s <= 0:
            raise ConfigurationError("timeout must be positive")
        if self._retry_delay_s < 0:
            raise ConfigurationError("retry_delay must be >= 0")
        return ClientConfig(
            api_key=self._api_key,
            environment=self._environment,
            base_url=self._base_url,
            timeout_s=float(self._timeout_s),
            max_retries=int(self._max_retries),
            retry_delay_s=float(self._retry_delay_s),
            webhook_secret=self._webhook_secret,
            debug=self._debug,
        )

    def build(self) -> XrplSaleClient:
        from .client import XrplSaleClient

        return XrplSaleClient(self.build_config())
