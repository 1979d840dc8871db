"""Reassemble, verify, extract and normalize a sharded payload."""

from __future__ import annotations

import logging
from typing import Optional

from zarf_injector.config import InjectorConfig
from zarf_injector.errors import InjectorError
from zarf_injector.models import PipelineResult, RunStats
from zarf_injector.payload.assembler import concat_shards
from zarf_injector.payload.locator import find_shards
from zarf_injector.payload.verify import verify_payload
from zarf_injector.stage.extractor import extract_payload
from zarf_injector.stage.permissions import normalize_permissions

LOGGER = logging.getLogger(__name__)


class Injector:
    """Runs the stage-two bootstrap steps in order, stopping at the first failure."""

    def __init__(self, config: InjectorConfig | None = None) -> None:
        self.config = config or InjectorConfig()

    def run(self, expected_digest: Optional[str] = None) -> PipelineResult:
        stats = RunStats()
        try:
            self._run(expected_digest, stats)
        except InjectorError as exc:
            LOGGER.debug("Pipeline aborted (%s): %s", exc.kind, exc)
            return PipelineResult(stats=stats, error=exc)
        return PipelineResult(stats=stats)

    def _run(self, expected_digest: Optional[str], stats: RunStats) -> None:
        config = self.config
        shards = find_shards(config.search_dir, config.shard_pattern)

        payload = concat_shards(shards)
        stats.shards_read = len(payload.shards)
        stats.bytes_read = payload.size

        stats.verified = verify_payload(payload, expected_digest)

        names = extract_payload(payload, config.dest_dir)
        stats.entries_extracted = len(names)

        stats.entries_normalized = normalize_permissions(config.dest_dir, config.mode)
