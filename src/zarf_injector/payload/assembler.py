"""Concatenate shard files into a single payload buffer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from zarf_injector.errors import IoError
from zarf_injector.models import Payload

LOGGER = logging.getLogger(__name__)


def read_shard(path: Path) -> bytes:
    """Read the full contents of one shard."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise IoError(f"Unable to read shard {path}: {exc}") from exc


def concat_shards(paths: Sequence[Path]) -> Payload:
    """Merge every shard, in the given order, into one payload."""
    buffer = bytearray()
    for path in paths:
        LOGGER.info("Processing %s", path)
        buffer += read_shard(path)
    return Payload(data=bytes(buffer), shards=list(paths))
