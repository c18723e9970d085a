#!/usr/bin/env python3
"""SlideQuest puzzle generator.

Usage::

    python main.py generate                      # Normal-sized puzzle
    python main.py generate -W 10 -H 10 -s 42    # reproducible 10×10
    python main.py generate -d expert --json     # JSON output
    python main.py solve puzzle.json             # solve a saved puzzle
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidequest.cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
