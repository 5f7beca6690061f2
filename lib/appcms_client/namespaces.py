from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .forms import FormData

if TYPE_CHECKING:
    from .client import AppCMSClient

ContentT = TypeVar("ContentT")


class _Namespace:
    def __init__(self, client: AppCMSClient[Any]):
        self._client = client

    async def _call(self, endpoint: str, method: str = "get", data: Any = None) -> Any:
        c = self._client
        return await c.make_request(c.generate_url(endpoint), method, data)


class AnalyticsApi(_Namespace):
    async def log(self, event: str, platform: str, device_id: str, data: str | None = None) -> Any:
        analytic: dict[str, Any] = {
            "event": event,
            "platform": platform,
            "device_id": device_id,
        }
        if data is not None:
            analytic["data"] = data
        return await self._call("/analytics/log", "post", {"analytic": analytic})


class AppConfigApi(_Namespace):
    async def fetch(self) -> Any:
        return await self._call("/app_config")


class ContentApi(_Namespace, Generic[ContentT]):
    async def fetch(self, locale: str) -> ContentT:
        return await self._call(f"/content/{locale}")

    async def file(self, file_id: str | int) -> Any:
        return await self._call(f"/content/file/{file_id}")


class TaskNotes:
    """Notes of one engineer task, rooted at ``.../tasks/{id}/notes``."""

    def __init__(self, client: AppCMSClient[Any], task_id: str | int):
        self._client = client
        self.base_url = client.generate_url(f"/vinduesgrossisten/tasks/{task_id}/notes")

    def url(self, endpoint: str = "") -> str:
        return f"{self.base_url}{endpoint}"

    async def get(self) -> Any:
        return await self._client.make_request(self.url())


class VinduesgrossistenApi(_Namespace):
    """Field-engineer task workflow."""

    async def login(self, access_key: str) -> Any:
        return await self._call("/vinduesgrossisten/engineer-login", "post", {"access_key": access_key})

    async def tasks(self, date: str) -> Any:
        return await self._call(f"/vinduesgrossisten/tasks?date={date}")

    async def task_update(
            self,
            task_id: str | int,
            *,
            note: str | None = None,
            materials: str | None = None,
    ) -> Any:
        values: dict[str, Any] = {}
        if note is not None:
            values["note"] = note
        if materials is not None:
            values["materials"] = materials
        return await self._call(f"/vinduesgrossisten/tasks/{task_id}", "patch", values)

    async def tasks_update_status(self, task_id: str | int, status_id: str | int, note: str) -> Any:
        body = {"vin_status_id": status_id, "note": note}
        return await self._call(f"/vinduesgrossisten/tasks/{task_id}/status", "put", body)

    async def statuses(self) -> Any:
        return await self._call("/vinduesgrossisten/statuses")

    def notes(self, task_id: str | int) -> TaskNotes:
        return TaskNotes(self._client, task_id)

    async def task_create_documentations(self, task_id: str | int, form: FormData) -> Any:
        return await self._call(f"/vinduesgrossisten/tasks/{task_id}/documentations", "post", form)

    async def task_update_documentations(self, task_id: str | int, *, note: str | None = None) -> Any:
        values: dict[str, Any] = {}
        if note is not None:
            values["note"] = note
        return await self._call(f"/vinduesgrossisten/tasks/{task_id}/documentations", "patch", values)

    async def task_delete_documentation(self, task_id: str | int, documentation_id: str | int) -> Any:
        return await self._call(
            f"/vinduesgrossisten/tasks/{task_id}/documentations/{documentation_id}",
            "delete",
        )

    async def task_delete_documentation_image(
            self,
            task_id: str | int,
            documentation_id: str | int,
            image_id: str | int,
    ) -> Any:
        return await self._call(
            f"/vinduesgrossisten/tasks/{task_id}/documentations/{documentation_id}/images/{image_id}",
            "delete",
        )
