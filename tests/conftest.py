from __future__ import annotations

import sys
from pathlib import Path

# Flat layout: make the top-level modules importable without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
