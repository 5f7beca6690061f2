from __future__ import annotations

import asyncio

import httpx
import pytest

from appcms_client import AppCMSClient, ClientConfig, FormData


def test_form_data_describe_leaves_out_file_contents() -> None:
    form = FormData().add_field("note", 12).add_file("images[]", b"raw-bytes", filename="a.jpg")

    assert len(form) == 2
    assert form.describe() == {"fields": {"note": "12"}, "files": [["images[]", "a.jpg"]]}
    assert form.parts[0] == ("note", (None, b"12"))


def test_form_data_file_name_defaults_to_field_name() -> None:
    form = FormData().add_file("photo", b"x", content_type="image/png")
    assert form.parts == [("photo", ("photo", b"x", "image/png"))]


@pytest.mark.asyncio
async def test_token_change_mid_flight_affects_only_later_requests() -> None:
    seen: list[str | None] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("authorization"))
        if len(seen) == 1:
            client.set_access_token("second")
        return httpx.Response(200, json={})

    client = AppCMSClient(ClientConfig(api_key="K", base_url="https://x"), transport=httpx.MockTransport(_handler))
    client.set_access_token("first")

    await client.app_config.fetch()
    await client.app_config.fetch()

    assert seen == ["Bearer first", "Bearer second"]
    await client.aclose()


@pytest.mark.asyncio
async def test_concurrent_requests_share_one_client() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"path": request.url.path})

    async with AppCMSClient(ClientConfig(api_key="K"), transport=httpx.MockTransport(_handler)) as client:
        results = await asyncio.gather(
            client.content.fetch("da"),
            client.content.fetch("en"),
            client.vinduesgrossisten.statuses(),
        )

    assert [r["path"] for r in results] == [
        "/api/K/content/da",
        "/api/K/content/en",
        "/api/K/vinduesgrossisten/statuses",
    ]
