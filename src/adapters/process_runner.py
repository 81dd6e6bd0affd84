"""asyncio subprocess implementation of `CommandRunner`.

- Runs the command line through the shell and captures stdout/stderr.
- A non-zero exit, a missing executable or an expired timeout raise
  `CommandExecutionError`; the caller sees the failure unchanged.
"""

from __future__ import annotations

import asyncio
import logging

from core.config import AppSettings
from core.domain.errors import CommandExecutionError
from core.interfaces.command_runner import CommandRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    def __init__(self, settings: AppSettings | None = None, *, timeout: float | None = None) -> None:
        self._settings = settings or AppSettings()
        self._timeout = timeout if timeout is not None else self._settings.command_timeout_seconds

    async def execute(self, command_line: str) -> str:
        logger.debug("Executing: %s", command_line)
        try:
            process = await asyncio.create_subprocess_shell(
                command_line,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise CommandExecutionError(command_line, reason=str(exc)) from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            process.kill()
            await process.wait()
            raise CommandExecutionError(
                command_line,
                reason=f"timed out after {self._timeout}s",
            ) from exc

        error_text = stderr.decode("utf-8", errors="replace")
        if process.returncode != 0:
            logger.error("Command exited with %s: %s", process.returncode, error_text.strip())
            raise CommandExecutionError(
                command_line,
                returncode=process.returncode,
                stderr=error_text,
            )
        if error_text.strip():
            logger.debug("stderr: %s", error_text.strip())

        return stdout.decode("utf-8", errors="replace")
