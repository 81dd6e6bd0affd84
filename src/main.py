"""Run script: `python -m main` from inside `src/`."""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
