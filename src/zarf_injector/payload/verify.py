"""Payload integrity verification."""

from __future__ import annotations

import logging
from typing import Optional

from zarf_injector.errors import ChecksumMismatch
from zarf_injector.models import Payload
from zarf_injector.utils.files import compute_sha256

LOGGER = logging.getLogger(__name__)


def verify_payload(payload: Payload, expected: Optional[str]) -> bool:
    """Check the payload's SHA256 against ``expected``.

    Returns ``False`` when no digest was supplied and verification was
    skipped, ``True`` when the digests match. The comparison is an exact
    string match against the lowercase hex digest; a mismatch raises
    :class:`ChecksumMismatch`.
    """
    if expected is None:
        LOGGER.debug("No checksum supplied, skipping verification")
        return False

    actual = compute_sha256(payload.data)
    if actual != expected:
        raise ChecksumMismatch(expected=expected, actual=actual)

    LOGGER.info("Checksum verified: %s", actual)
    return True
