"""Run the scandev CLI from a source checkout: `python -m main show`.

Without `pip install -e .` the `core`, `adapters` and `cli` packages under
`src/` are not importable, so `src/` is put on the path first.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC) not in sys.path:
        sys.path.insert(0, str(SRC))

    from cli.main import app  # noqa: PLC0415

    app(prog_name="scandev")


if __name__ == "__main__":
    main()
