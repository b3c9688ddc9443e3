"""Print every mythoji glyph, grouped by family.

Run with: ``python print_catalog.py [person|creature|location|item|symbol ...]``

People are listed with each skin tone and gender they support, which makes it
easy to spot the sequences a terminal cannot render.
"""
from __future__ import annotations

from pathlib import Path
import sys

# Ensure src/ is on the import path so the script works from a checkout.
SRC_PATH = Path(__file__).parent / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.append(str(SRC_PATH))

from mythoji.catalog import main  # type: ignore


if __name__ == "__main__":
    sys.exit(main())
