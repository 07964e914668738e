from __future__ import annotations

from burger_builder.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
