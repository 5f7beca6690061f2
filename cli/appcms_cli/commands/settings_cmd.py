from __future__ import annotations

import os

import typer
from appcms_client import DEFAULT_BASE_URL

from .. import console
from ..config import load_config, save_config, default_config, config_path, normalize_base_url

app = typer.Typer(help="Manage local CLI settings (~/.config/appcms/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        api_key: str = typer.Option(..., "--api-key", prompt="API key", help="AppCMS API key."),
        base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", help="API base URL."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.api_key = api_key.strip()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.api_key:
        console.err("API key cannot be empty.")
        raise typer.Exit(code=2)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    key_state = "(set)" if cfg.api_key else "(empty)"
    token_state = "(set)" if (cfg.auth.token or "").strip() else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url} api_key={key_state} token={token_state} token_type={cfg.auth.token_type}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, api_key)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "base_url":
        console.console.print(cfg.base_url)
        return
    if k == "api_key":
        console.console.print(cfg.api_key)
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        api_key: str | None = typer.Option(None, "--api-key", help="Set API key."),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True) or DEFAULT_BASE_URL
    if api_key is not None:
        cfg.api_key = api_key.strip()
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
