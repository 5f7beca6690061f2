from __future__ import annotations

from typing import IO, Any


class FormData:
    """Multipart payload made of text fields and file parts.

    Text fields are stored as filename-less parts so httpx always encodes the
    payload as multipart/form-data (and picks the boundary itself), even when
    no file was attached.
    """

    def __init__(self) -> None:
        self._parts: list[tuple[str, tuple[Any, ...]]] = []

    def add_field(self, name: str, value: Any) -> FormData:
        self._parts.append((name, (None, str(value).encode("utf-8"))))
        return self

    def add_file(
            self,
            name: str,
            content: bytes | IO[bytes],
            *,
            filename: str | None = None,
            content_type: str | None = None,
    ) -> FormData:
        part: tuple[Any, ...] = (filename or name, content)
        if content_type:
            part = (*part, content_type)
        self._parts.append((name, part))
        return self

    @property
    def parts(self) -> list[tuple[str, tuple[Any, ...]]]:
        return list(self._parts)

    def describe(self) -> dict[str, Any]:
        # log-friendly view, file contents left out
        fields: dict[str, str] = {}
        files: list[list[str]] = []
        for name, part in self._parts:
            if part[0] is None:
                fields[name] = part[1].decode("utf-8")
            else:
                files.append([name, str(part[0])])
        return {"fields": fields, "files": files}

    def __len__(self) -> int:
        return len(self._parts)
