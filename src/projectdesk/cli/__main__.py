"""Console entry point for ``projectdesk`` and ``python -m projectdesk.cli``."""

from __future__ import annotations

from .app import app


def main() -> None:  # pragma: no cover
    app(prog_name="projectdesk")


if __name__ == "__main__":  # pragma: no cover
    main()
