from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import NetworkError, ResponseParseError
from .forms import FormData

logger = logging.getLogger(__name__)

BODY_METHODS = {"post", "patch", "put"}
JSON_CONTENT_TYPE = "application/json"


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        # per-request headers are built in request(); only static ones live here
        self._client = httpx.AsyncClient(
            timeout=cfg.timeout_s,
            headers={"User-Agent": "appcms-client/0.1.0"},
            follow_redirects=True,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, url: str, *, data: Any = None, token: str = "") -> Any:
        headers: dict[str, str] = {}
        if token:
            headers["authorization"] = f"Bearer {token}"

        content: bytes | None = None
        files = None
        if method.lower() in BODY_METHODS:
            if isinstance(data, FormData):
                files = data.parts
            else:
                if data is not None:
                    content = json.dumps(data).encode("utf-8")
                headers["content-type"] = JSON_CONTENT_TYPE

        logger.debug(
            "[Request] init - %s - %s - %s - %s",
            url,
            method,
            _dump_payload(data),
            json.dumps(_redact(headers)),
        )

        try:
            r = await self._client.request(method.upper(), url, content=content, files=files, headers=headers)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        content_type = r.headers.get("content-type")
        if content_type and content_type.lower() != JSON_CONTENT_TYPE:
            # read but unused: non-JSON responses still go through json parsing below
            _ = r.text

        try:
            return r.json()
        except ValueError as e:
            raise ResponseParseError(
                f"{method.upper()} {url} returned a non-JSON body ({r.status_code})",
                r.status_code,
                r.text[:1000],
            ) from e


def _dump_payload(data: Any) -> str:
    if isinstance(data, FormData):
        return json.dumps(data.describe())
    try:
        return json.dumps(data)
    except (TypeError, ValueError):
        return repr(data)


def _redact(headers: dict[str, str]) -> dict[str, str]:
    out = dict(headers)
    if "authorization" in out:
        out["authorization"] = "Bearer ***"
    return out
