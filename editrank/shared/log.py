"""Minimal logging helpers."""

from __future__ import annotations

import os
import sys
from typing import Any


def eprint(*args: Any, **kwargs: Any) -> None:
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def debug(msg: str) -> None:
    """Print to stderr only when EDITRANK_DEBUG=1."""
    if os.environ.get("EDITRANK_DEBUG") == "1":
        eprint(f"[debug] {msg}")
