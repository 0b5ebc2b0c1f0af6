#!/usr/bin/env python3
"""CLI entry point for the utilbelt helpers."""
from __future__ import annotations

import sys
from pathlib import Path

# Allow running the script directly from the repository root without installing the
# package by adding ``src`` to ``sys.path`` when available.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    src_str = str(SRC_PATH)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)

from utilbelt.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
