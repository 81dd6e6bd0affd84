"""Contract for running the external listing command.

`execute` is asynchronous because the scanner backend can take seconds to
enumerate a device; the caller simply awaits it. Timeouts and retries, if any,
belong to the implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    async def execute(self, command_line: str) -> str:
        """Run `command_line` and return its captured standard output."""

        ...
