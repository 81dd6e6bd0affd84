"""Errors raised while turning a listing into a `DeviceModel`.

Malformed capability text is *not* an error: normalizers return NaN/empty
fields instead. Only the failures below abort a build.
"""

from __future__ import annotations


class DeviceListingError(ValueError):
    """Base class for listings that cannot produce a device."""


class EmptyInputError(DeviceListingError):
    def __init__(self) -> None:
        super().__init__("No device found: the capability listing is empty.")


class NoDeviceIdentifierError(DeviceListingError):
    def __init__(self) -> None:
        super().__init__("The capability listing names no device backend.")


class UnsupportedInputTypeError(TypeError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unexpected data for a device model: {type(value).__name__}")
        self.value = value


class CommandExecutionError(RuntimeError):
    """The external listing command failed to run or exited with an error."""

    def __init__(
        self,
        command: str,
        *,
        returncode: int | None = None,
        stderr: str = "",
        reason: str | None = None,
    ) -> None:
        detail = reason or f"exit status {returncode}"
        message = f"Command failed ({detail}): {command}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
