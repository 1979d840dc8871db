"""Core injector data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from zarf_injector.errors import InjectorError


@dataclass(slots=True)
class Payload:
    """Concatenated shard bytes and the shards they were read from."""

    data: bytes
    shards: List[Path] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(slots=True)
class RunStats:
    shards_read: int = 0
    bytes_read: int = 0
    verified: bool = False
    entries_extracted: int = 0
    entries_normalized: int = 0


@dataclass(slots=True)
class PipelineResult:
    """Outcome of one pipeline run: stats plus the failure, if any."""

    stats: RunStats = field(default_factory=RunStats)
    error: Optional[InjectorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
