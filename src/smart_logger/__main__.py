"""Module entrypoint.

Allows:
    python -m smart_logger
"""

from __future__ import annotations

from smart_logger.cli import main

if __name__ == "__main__":
    main()
