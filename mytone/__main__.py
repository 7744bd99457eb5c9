"""Module entrypoint for running MyTone as ``python -m mytone``."""

from __future__ import annotations

from mytone.cli import main


if __name__ == "__main__":
    main()
