from __future__ import annotations
import sys
from qnotepad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m qnotepad.main` or `python -m qnotepad` (via __main__)."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
