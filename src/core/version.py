"""Application version.

Stamped into every assembled `DeviceModel` and compared against the cached copy
to decide whether the cache is still valid. Keep in sync with `pyproject.toml`.
"""

from __future__ import annotations

APP_VERSION = "0.1.0"
