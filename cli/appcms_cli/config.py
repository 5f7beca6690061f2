from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from appcms_client import DEFAULT_BASE_URL

from . import console

APP_NAME = "appcms"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "APPCMS_API_KEY"
ENV_BASE_URL = "APPCMS_BASE_URL"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    token: str = ""
    token_type: str = "bearer"


@dataclass
class AppConfig:
    api_key: str
    base_url: str
    auth: AuthConfig


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        api_key="",
        base_url=DEFAULT_BASE_URL,
        auth=AuthConfig(token="", token_type="bearer"),
    )


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
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

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "api_key": cfg.api_key,
            "base_url": cfg.base_url,
            "auth": {
                "token": cfg.auth.token,
                "token_type": cfg.auth.token_type,
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune_none(item) for item in value if item is not None]
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.api_key = str(data.get("api_key") or "").strip()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    if base_url:
        cfg.base_url = base_url
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth.token = str(auth_raw.get("token") or "")
        cfg.auth.token_type = str(auth_raw.get("token_type") or "bearer")
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_env(cfg: AppConfig) -> AppConfig:
    api_key = os.getenv(ENV_API_KEY, "").strip()
    base_url = normalize_base_url(os.getenv(ENV_BASE_URL, ""))
    return AppConfig(
        api_key=api_key or cfg.api_key,
        base_url=base_url or cfg.base_url,
        auth=AuthConfig(token=cfg.auth.token, token_type=cfg.auth.token_type),
    )


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
