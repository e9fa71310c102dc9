"""Write the example upload templates to a directory (default: ./templates)."""
from __future__ import annotations

import os
import sys
from pathlib import Path

# ensure workspace root on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.templates import write_templates


def main(argv: list[str] | None = None) -> list[Path]:
    argv = sys.argv[1:] if argv is None else argv
    out_dir = Path(argv[0]) if argv else Path("templates")
    paths = write_templates(out_dir)
    for p in paths:
        print(f"Wrote {p}")
    return paths


if __name__ == "__main__":
    main()
