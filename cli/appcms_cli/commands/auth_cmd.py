from __future__ import annotations

from typing import Any

import typer

from .. import console
from ..config import load_config, save_config
from ..http import run_with_client

app = typer.Typer(help="Engineer login/logout.")


def extract_token(data: Any) -> str | None:
    if isinstance(data, dict):
        token = data.get("token") or data.get("access_token")
        if isinstance(token, str) and token:
            return token
    return None


@app.command("login")
def login(
    access_key: str = typer.Option(..., "--access-key", prompt=True, hide_input=True, help="Engineer access key."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    data = run_with_client(
        cfg,
        lambda client: client.vinduesgrossisten.login(access_key),
        base_url_override=base_url,
    )
    token = extract_token(data)
    if token is None:
        console.err("Login failed: response carried no token.")
        if isinstance(data, dict) and data:
            console.print_json(data)
        raise typer.Exit(code=2)

    cfg.auth.token = token
    cfg.auth.token_type = "bearer"
    save_path = save_config(cfg)
    console.ok(f"Login successful. Token saved to {save_path}.")


@app.command("logout", help="Clear the stored access token.")
def logout():
    cfg = load_config()
    cfg.auth.token = ""
    save_path = save_config(cfg)
    console.ok(f"Token cleared from {save_path}.")
