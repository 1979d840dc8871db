"""Shared fixtures for building payload tarballs and shards."""

from __future__ import annotations

import gzip
import io
import tarfile
from pathlib import Path
from typing import Callable, Dict, List

import pytest


def build_tarball(files: Dict[str, bytes], *, mode: int = 0o644) -> bytes:
    """Return gzip-compressed tar bytes holding ``files`` (name -> content)."""
    raw = io.BytesIO()
    with tarfile.open(fileobj=raw, mode="w") as archive:
        for name, content in files.items():
            info = tarfile.TarInfo(name=name)
            info.size = len(content)
            info.mode = mode
            archive.addfile(info, io.BytesIO(content))
    return gzip.compress(raw.getvalue())


def write_shards(directory: Path, data: bytes, count: int) -> List[Path]:
    """Split ``data`` into ``count`` zarf-payload-N files under ``directory``."""
    step = max(len(data) // count, 1)
    paths = []
    for index in range(count):
        start = index * step
        end = len(data) if index == count - 1 else start + step
        path = directory / f"zarf-payload-{index}"
        path.write_bytes(data[start:end])
        paths.append(path)
    return paths


@pytest.fixture
def shard_writer() -> Callable[..., List[Path]]:
    return write_shards


@pytest.fixture
def make_tarball() -> Callable[..., bytes]:
    return build_tarball


@pytest.fixture
def shard_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "shards"
    directory.mkdir()
    return directory


@pytest.fixture
def stage_dir(tmp_path: Path) -> Path:
    return tmp_path / "zarf-stage2"
