from __future__ import annotations
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://www.appcms.dk"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str | None = None
    timeout_s: float = 15.0

    def resolved_base_url(self) -> str:
        return self.base_url or DEFAULT_BASE_URL
