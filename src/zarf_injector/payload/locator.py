"""Shard discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from zarf_injector.config import DEFAULT_SHARD_PATTERN
from zarf_injector.errors import PatternError

LOGGER = logging.getLogger(__name__)


def _validate_pattern(pattern: str) -> None:
    if not pattern:
        raise PatternError("Shard pattern is empty")
    if os.sep in pattern or (os.altsep and os.altsep in pattern):
        raise PatternError(f"Shard pattern must not contain a path separator: {pattern!r}")
    if "**" in pattern:
        raise PatternError(f"Shard pattern must not be recursive: {pattern!r}")
    depth = 0
    for char in pattern:
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
    if depth:
        raise PatternError(f"Unterminated character class in shard pattern: {pattern!r}")


def find_shards(search_dir: Path, pattern: str = DEFAULT_SHARD_PATTERN) -> List[Path]:
    """Return shards in search_dir matching pattern, sorted by full path string."""
    _validate_pattern(pattern)
    shards = sorted(Path(search_dir).glob(pattern), key=str)
    if not shards:
        LOGGER.warning("No files matching %s found in %s", pattern, search_dir)
    else:
        LOGGER.debug("Found %d shard(s) in %s", len(shards), search_dir)
    return shards
