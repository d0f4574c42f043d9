from __future__ import annotations

from c4search.main import main

if __name__ == "__main__":
    raise SystemExit(main())
