from __future__ import annotations

from appcms_client import DEFAULT_BASE_URL

from appcms_cli import config
from appcms_cli.http import make_client


def test_make_client_uses_saved_key_and_token(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_API_KEY, raising=False)
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    cfg = config.default_config()
    cfg.api_key = "K"
    cfg.auth.token = "tok"

    client = make_client(cfg)

    assert client.base_url == DEFAULT_BASE_URL
    assert client.access_token == "tok"
    assert client.generate_url("app_config") == f"{DEFAULT_BASE_URL}/api/K/app_config"


def test_make_client_normalizes_base_url_override(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    monkeypatch.setenv(config.ENV_API_KEY, "env-key")
    cfg = config.default_config()

    client = make_client(cfg, base_url_override="cms.example.com/")

    assert client.base_url == "https://cms.example.com"
    assert client.access_token == ""
    assert client.generate_url("/content/da") == "https://cms.example.com/api/env-key/content/da"
