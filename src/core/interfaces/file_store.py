"""Contract for the single-path cache of the last known device."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StructuredFileStore(Protocol):
    """File-store bound to one fixed path.

    Rules:
    - `read_as_structured` fails when the content is not parseable.
    - `save` replaces the whole content with the serialized text.
    """

    def exists(self) -> bool: ...

    def read_as_structured(self) -> Any: ...

    def save(self, serialized: str) -> None: ...

    def delete(self) -> None: ...
