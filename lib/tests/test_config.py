from __future__ import annotations

import pytest

from xrplsale import ClientBuilder, ConfigurationError, Environment, XrplSaleClient
from xrplsale import client as client_mod
from xrplsale import config


def test_build_requires_api_key() -> None:
    with pytest.raises(ConfigurationError, match="API key is required"):
        ClientBuilder().build()


def test_build_rejects_blank_api_key_without_creating_transport(monkeypatch) -> None:
    created = []

    class _FakeTransport:
        def __init__(self, *args, **kwargs) -> None:
            created.append(args)

    monkeypatch.setattr(client_mod, "Transport", _FakeTransport)

    with pytest.raises(ConfigurationError):
        XrplSaleClient.builder().api_key("   ").build()
    assert created == []


def test_builder_defaults() -> None:
    cfg = ClientBuilder().api_key("key").build_config()

    assert cfg.environment is Environment.PRODUCTION
    assert cfg.timeout_s == 30.0
    assert cfg.max_retries == 3
    assert cfg.retry_delay_s == 1.0
    assert cfg.webhook_secret is None
    assert cfg.debug is False
    assert cfg.resolved_base_url == "https://api.xrpl.sale/v1"


def test_builder_sets_every_field() -> None:
    cfg = (
        ClientBuilder()
        .api_key("key")
        .environment("testnet")
        .timeout(5)
        .max_retries(0)
        .retry_delay(0.25)
        .webhook_secret("whsec")
        .debug()
        .build_config()
    )

    assert cfg.environment is Environment.TESTNET
    assert cfg.resolved_base_url == "https://api-testnet.xrpl.sale/v1"
    assert cfg.timeout_s == 5.0
    assert cfg.max_retries == 0
    assert cfg.retry_delay_s == 0.25
    assert cfg.webhook_secret == "whsec"
    assert cfg.debug is True


def test_base_url_override_wins_over_environment() -> None:
    cfg = ClientBuilder().api_key("key").environment(Environment.TESTNET).base_url("sandbox.example.com/v2/").build_config()
    assert cfg.resolved_base_url == "https://sandbox.example.com/v2"


def test_config_is_immutable() -> None:
    cfg = ClientBuilder().api_key("key").build_config()
    with pytest.raises(AttributeError):
        cfg.api_key = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "configure",
    [
        lambda b: b.max_retries(-1),
        lambda b: b.timeout(0),
        lambda b: b.retry_delay(-0.5),
    ],
)
def test_builder_rejects_invalid_numbers(configure) -> None:
    builder = ClientBuilder().api_key("key")
    configure(builder)
    with pytest.raises(ConfigurationError):
        builder.build_config()


def test_build_returns_client() -> None:
    client = ClientBuilder().api_key("key").environment("prod").build()
    assert isinstance(client, XrplSaleClient)
    assert client.base_url == "https://api.xrpl.sale/v1"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("production", Environment.PRODUCTION),
        ("PROD", Environment.PRODUCTION),
        (" testnet ", Environment.TESTNET),
        ("test", Environment.TESTNET),
    ],
)
def test_environment_parse(raw: str, expected: Environment) -> None:
    assert Environment.parse(raw) is expected


def test_environment_parse_rejects_unknown() -> None:
    with pytest.raises(ConfigurationError, match="Invalid environment: staging"):
        Environment.parse("staging")


def test_environment_str() -> None:
    assert str(Environment.PRODUCTION) == "production"
    assert str(Environment.TESTNET) == "testnet"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("example.com") == "https://example.com"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("127.0.0.1:8010") == "http://127.0.0.1:8010"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://example.com/v1/") == "https://example.com/v1"


@pytest.mark.parametrize("raw", ["not a url", "https://api example.com/v1", "example.com\t/v1"])
def test_normalize_base_url_rejects_whitespace(raw: str) -> None:
    with pytest.raises(ConfigurationError, match="Invalid base URL"):
        config.normalize_base_url(raw)


def test_builder_rejects_malformed_base_url_when_set() -> None:
    builder = ClientBuilder().api_key("key")

    with pytest.raises(ConfigurationError, match="Invalid base URL"):
        builder.base_url("not a url")


def test_from_env_rejects_malformed_base_url(tmp_path) -> None:
    environ = {config.ENV_API_KEY: "k", config.ENV_BASE_URL: "not a url"}
    with pytest.raises(ConfigurationError, match="Invalid base URL"):
        ClientBuilder.from_env(str(tmp_path / "absent.toml"), environ=environ)


def test_load_config_missing_file_returns_empty(tmp_path) -> None:
    assert config.load_config(str(tmp_path / "absent.toml")) == {}


def test_load_config_uses_user_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    tmp_path.joinpath("config.toml").write_text('api_key = "from-file"\n', encoding="utf-8")

    assert config.load_config() == {"api_key": "from-file"}


def test_load_config_applies_profile(tmp_path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        "\n".join(
            [
                'api_key = "default-key"',
                'environment = "production"',
                "max_retries = 5",
                "",
                "[profiles.dev]",
                'api_key = "dev-key"',
                'environment = "testnet"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = config.load_config(str(path), profile="dev")

    assert settings == {"api_key": "dev-key", "environment": "testnet", "max_retries": 5}


def test_load_config_unknown_profile(tmp_path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('api_key = "k"\n', encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Unknown profile: qa"):
        config.load_config(str(path), profile="qa")


def test_load_config_malformed_toml(tmp_path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("api_key = \n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid config file"):
        config.load_config(str(path))


def test_from_env_overrides_file(tmp_path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('api_key = "file-key"\ntimeout_s = 10\nwebhook_secret = "file-secret"\n', encoding="utf-8")
    environ = {
        config.ENV_API_KEY: "env-key",
        config.ENV_ENVIRONMENT: "testnet",
        config.ENV_MAX_RETRIES: "1",
        config.ENV_RETRY_DELAY: "0.5",
        config.ENV_DEBUG: "true",
        config.ENV_BASE_URL: "",
    }

    cfg = ClientBuilder.from_env(str(path), environ=environ).build_config()

    assert cfg.api_key == "env-key"
    assert cfg.environment is Environment.TESTNET
    assert cfg.timeout_s == 10.0
    assert cfg.max_retries == 1
    assert cfg.retry_delay_s == 0.5
    assert cfg.webhook_secret == "file-secret"
    assert cfg.debug is True
    assert cfg.base_url is None


def test_from_env_rejects_non_numeric_retries(tmp_path) -> None:
    environ = {config.ENV_API_KEY: "k", config.ENV_MAX_RETRIES: "many"}
    with pytest.raises(ConfigurationError, match="max_retries must be an integer"):
        ClientBuilder.from_env(str(tmp_path / "absent.toml"), environ=environ)


def test_from_env_without_api_key_fails_at_build(tmp_path) -> None:
    builder = ClientBuilder.from_env(str(tmp_path / "absent.toml"), environ={})
    with pytest.raises(ConfigurationError, match="API key is required"):
        builder.build_config()
