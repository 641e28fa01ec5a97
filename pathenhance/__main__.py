"""Module entrypoint for running pathenhance as ``python -m pathenhance``."""

from __future__ import annotations

from pathenhance.cli import main


if __name__ == "__main__":
    main()
