"""Device assembly and cache-aware retrieval.

Two ways into a `DeviceModel`:
- raw text from `scanimage -A` -> `parse_listing` -> dispatch every entry
- structured data from the cache -> validated as-is, never re-normalized

`DeviceService` owns the cache decision: a missing cache or one stamped with
another application version triggers a fresh listing; otherwise the cached
model is returned unchanged.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from core.config import AppSettings
from core.domain.errors import UnsupportedInputTypeError
from core.domain.models import DeviceModel, ParsedListing
from core.interfaces.command_runner import CommandRunner
from core.interfaces.file_store import StructuredFileStore
from core.services.dispatcher import normalize_capability
from core.services.listing_parser import parse_listing
from core.version import APP_VERSION

logger = logging.getLogger(__name__)


def from_raw(parsed: ParsedListing, *, version: str = APP_VERSION) -> DeviceModel:
    """Stamp `version` and normalize every raw entry."""

    features = {key: normalize_capability(entry) for key, entry in parsed.entries.items()}
    return DeviceModel(id=parsed.id, version=version, features=features)


def from_raw_text(text: str | None, *, version: str = APP_VERSION) -> DeviceModel:
    return from_raw(parse_listing(text), version=version)


def from_structured(data: Mapping[str, Any]) -> DeviceModel:
    """Rebuild a model from its serialized form; capabilities are already normalized."""

    return DeviceModel.model_validate(dict(data))


def build_device_model(value: object, *, version: str = APP_VERSION) -> DeviceModel:
    """Build from listing text or from structured data.

    Raises `UnsupportedInputTypeError` for anything else.
    """

    if isinstance(value, DeviceModel):
        return value
    if value is None or isinstance(value, str):
        return from_raw_text(value, version=version)
    if isinstance(value, Mapping):
        return from_structured(value)
    raise UnsupportedInputTypeError(value)


def serialize_device(device: DeviceModel) -> str:
    payload = device.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


class DeviceService:
    """Retrieves the device, through the cache when it is still valid."""

    def __init__(
        self,
        runner: CommandRunner,
        store: StructuredFileStore,
        settings: AppSettings | None = None,
        *,
        version: str = APP_VERSION,
    ) -> None:
        self._runner = runner
        self._store = store
        self._settings = settings or AppSettings()
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def _read_cache(self) -> Mapping[str, Any] | None:
        if not self._store.exists():
            logger.debug("Device cache does not exist. Reloading")
            return None

        cached = self._store.read_as_structured()
        if not isinstance(cached, Mapping):
            logger.debug("Device cache holds %s, not a device. Reloading", type(cached).__name__)
            return None
        if cached.get("version") != self._version:
            logger.debug(
                "Device cache version %r differs from %s. Reloading",
                cached.get("version"),
                self._version,
            )
            return None
        return cached

    async def refresh_device(self) -> DeviceModel:
        """Run the listing command, build the model and overwrite the cache."""

        command = self._settings.listing_command()
        logger.info("Listing device options: %s", command)
        listing = await self._runner.execute(command)

        device = from_raw_text(listing, version=self._version)
        self._store.save(serialize_device(device))
        logger.info("Cached device %s with %d features", device.id, len(device.features))
        return device

    async def get_device(self) -> DeviceModel:
        cached = self._read_cache()
        if cached is None:
            return await self.refresh_device()
        return from_structured(cached)

    def reset_device(self) -> None:
        """Delete the cached device, if any."""

        if self._store.exists():
            logger.debug("Deleting cached device")
            self._store.delete()
