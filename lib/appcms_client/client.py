from __future__ import annotations

from typing import Any, Generic, TypeVar

import httpx

from .config_types import ClientConfig
from .errors import ConfigurationError
from .namespaces import AnalyticsApi, AppConfigApi, ContentApi, VinduesgrossistenApi
from .transport import Transport

ContentT = TypeVar("ContentT")


class AppCMSClient(Generic[ContentT]):
    """Async client for the AppCMS API.

    ``ContentT`` is the caller's shape for the content document returned by
    ``content.fetch``; every other operation returns the decoded JSON as is.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        if not isinstance(cfg.api_key, str) or not cfg.api_key:
            raise ConfigurationError("api_key is required")
        self._cfg = cfg
        self._base_url = cfg.resolved_base_url()
        self._access_token = ""
        self._t = Transport(cfg, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def access_token(self) -> str:
        return self._access_token

    def set_access_token(self, token: str) -> None:
        self._access_token = token

    def generate_url(self, endpoint: str, with_api_key: bool = True) -> str:
        url = self._base_url
        if with_api_key:
            url += f"/api/{self._cfg.api_key}"
        if not endpoint.startswith("/"):
            return f"{url}/{endpoint}"
        return f"{url}{endpoint}"

    async def make_request(self, url: str, method: str = "get", data: Any = None) -> Any:
        # token is read here so concurrent calls see the value current at build time
        return await self._t.request(method, url, data=data, token=self._access_token)

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> AppCMSClient[ContentT]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # --- resource namespaces ---
    @property
    def analytics(self) -> AnalyticsApi:
        return AnalyticsApi(self)

    @property
    def app_config(self) -> AppConfigApi:
        return AppConfigApi(self)

    @property
    def content(self) -> ContentApi[ContentT]:
        return ContentApi(self)

    @property
    def vinduesgrossisten(self) -> VinduesgrossistenApi:
        return VinduesgrossistenApi(self)
