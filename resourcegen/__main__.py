"""Entry point: python -m resourcegen

Same commands as the resourcegen console script.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
