"""JSON file store for the cached device.

One fixed path; the content is whatever `save` was given, expected to be JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.config import AppSettings
from core.interfaces.file_store import StructuredFileStore


class JsonFileStore(StructuredFileStore):
    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "JsonFileStore":
        settings = settings or AppSettings()
        return cls(settings.cache_path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists() and self._path.is_file()

    def read_as_structured(self) -> Any:
        """Parsed JSON content; `json.JSONDecodeError` when it is not JSON."""

        return json.loads(self._path.read_text(encoding="utf-8"))

    def save(self, serialized: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(serialized, encoding="utf-8")

    def delete(self) -> None:
        self._path.unlink(missing_ok=True)
