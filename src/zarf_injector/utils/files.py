"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Iterator


def iter_tree(root: Path) -> Iterator[Path]:
    """Yield root, then every descendant depth-first in sorted order.

    Children of a directory are listed only after the directory itself has
    been yielded, so callers may fix its permissions before it is read.
    """
    yield root
    if root.is_dir() and not root.is_symlink():
        for child in sorted(root.iterdir(), key=lambda p: p.name):
            yield from iter_tree(child)


def compute_sha256(data: bytes) -> str:
    """Compute SHA256 hash for an in-memory buffer."""
    return hashlib.sha256(data).hexdigest()
