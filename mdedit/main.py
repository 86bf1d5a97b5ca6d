from __future__ import annotations
import sys
from mdedit.app import run_app


def main() -> int:
    """Module entrypoint for `python -m mdedit` and the `mdedit` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
