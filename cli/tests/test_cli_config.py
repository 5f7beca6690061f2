from __future__ import annotations

from appcms_client import DEFAULT_BASE_URL

from appcms_cli import config


def _use_tmp_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.load_config()
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.api_key == ""
    assert cfg.auth.token == ""


def test_save_config_keeps_token_and_key(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.default_config()
    cfg.api_key = "K"
    cfg.auth.token = "tok"

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert 'api_key = "K"' in contents
    loaded = config.load_config()
    assert loaded.auth.token == "tok"
    assert loaded.base_url == DEFAULT_BASE_URL


def test_env_overrides_file_values(monkeypatch) -> None:
    cfg = config.default_config()
    cfg.api_key = "from-file"
    monkeypatch.setenv(config.ENV_API_KEY, "from-env")
    monkeypatch.setenv(config.ENV_BASE_URL, "cms.example.test/")

    effective = config.apply_env(cfg)

    assert effective.api_key == "from-env"
    assert effective.base_url == "https://cms.example.test"
    assert cfg.api_key == "from-file"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("example.com") == "https://example.com"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("localhost:8000") == "http://localhost:8000"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://example.com/") == "https://example.com"
