#!/usr/bin/env python3
"""Generate a mock financial dataset from a source checkout."""
from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from datagen.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
