"""Allow ``python -m torrentview``."""

from __future__ import annotations

from torrentview.cli.main import main

if __name__ == "__main__":
    main()
