#!/usr/bin/env python3
"""Entry point for running as `python -m mcpack`."""

from mcpack.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
