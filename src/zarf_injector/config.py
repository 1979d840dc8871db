"""Injector configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SHARD_PATTERN = "zarf-payload-*"
DEFAULT_DEST_DIR = Path("/zarf-stage2")
DEFAULT_MODE = 0o755


@dataclass(slots=True)
class InjectorConfig:
    search_dir: Path | None = None
    dest_dir: Path = DEFAULT_DEST_DIR
    shard_pattern: str = DEFAULT_SHARD_PATTERN
    mode: int = DEFAULT_MODE

    def __post_init__(self) -> None:
        if self.search_dir is None:
            self.search_dir = Path.cwd()
