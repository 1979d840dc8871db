"""Permission normalization for the extracted stage tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from zarf_injector.config import DEFAULT_MODE
from zarf_injector.errors import IoError
from zarf_injector.utils.files import iter_tree

LOGGER = logging.getLogger(__name__)


def chmod_entry(path: Path, mode: int = DEFAULT_MODE) -> None:
    LOGGER.info("chmod %o %s", mode, path)
    try:
        os.chmod(path, mode)
    except OSError as exc:
        raise IoError(f"Unable to chmod {path}: {exc}") from exc


def normalize_permissions(root: Path, mode: int = DEFAULT_MODE) -> int:
    """Set ``mode`` on root and every entry beneath it, returning the count."""
    count = 0
    try:
        for path in iter_tree(Path(root)):
            chmod_entry(path, mode)
            count += 1
    except OSError as exc:
        raise IoError(f"Unable to walk {root}: {exc}") from exc
    return count
