from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import typer
from appcms_client import AppCMSClient, AppCMSClientError
from appcms_client.config_types import ClientConfig

from . import console
from .config import AppConfig, apply_env, normalize_base_url


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> AppCMSClient:
    effective_cfg = apply_env(cfg)
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url, warn=True)
    client: AppCMSClient = AppCMSClient(
        ClientConfig(
            api_key=effective_cfg.api_key,
            base_url=base_url or None,
        )
    )
    if effective_cfg.auth.token:
        client.set_access_token(effective_cfg.auth.token)
    return client


def run_with_client(
        cfg: AppConfig,
        call: Callable[[AppCMSClient], Awaitable[Any]],
        *,
        base_url_override: str | None = None,
) -> Any:
    """Run one API call on a fresh client; library errors exit with code 2."""

    async def _run() -> Any:
        client = make_client(cfg, base_url_override=base_url_override)
        try:
            return await call(client)
        finally:
            await client.aclose()

    try:
        return asyncio.run(_run())
    except AppCMSClientError as e:
        console.err(str(e) or e.__class__.__name__)
        raise typer.Exit(code=2)
