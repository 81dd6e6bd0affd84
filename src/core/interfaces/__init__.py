"""Core interfaces.

Collaborators (process execution, cache file) are `Protocol`s so the assembler
can be exercised with in-memory fakes.
"""

from core.interfaces.command_runner import CommandRunner
from core.interfaces.file_store import StructuredFileStore

__all__ = ["CommandRunner", "StructuredFileStore"]
