"""Unpack the payload tarball into the stage directory."""

from __future__ import annotations

import io
import logging
import tarfile
import zlib
from pathlib import Path
from typing import Iterator, List

from zarf_injector.errors import ExtractionError
from zarf_injector.models import Payload

LOGGER = logging.getLogger(__name__)

_READ_ERRORS = (tarfile.TarError, zlib.error, EOFError)


class _StrictTarInfo(tarfile.TarInfo):
    """Member header that refuses to read a corrupt block as end of archive."""

    @classmethod
    def fromtarfile(cls, tarfile_obj):
        try:
            return super().fromtarfile(tarfile_obj)
        except (tarfile.InvalidHeaderError, tarfile.TruncatedHeaderError) as exc:
            # surfaces as ReadError at any offset, not only the first header
            raise tarfile.SubsequentHeaderError(str(exc)) from exc


def _tracked(archive: tarfile.TarFile, names: List[str]) -> Iterator[tarfile.TarInfo]:
    for member in archive:
        names.append(member.name)
        yield member


def extract_payload(payload: Payload, dest_dir: Path) -> List[str]:
    """Decompress and unpack ``payload`` into ``dest_dir``.

    The buffer is read as a gzip stream and never decompressed in full. The
    archive header is checked before ``dest_dir`` is created, so a payload
    that is not a gzip tarball leaves the filesystem untouched. A failure
    while unpacking leaves any entries already written in place.
    """
    dest = Path(dest_dir)
    names: List[str] = []
    try:
        with tarfile.open(
            fileobj=io.BytesIO(payload.data), mode="r|gz", tarinfo=_StrictTarInfo
        ) as archive:
            dest.mkdir(parents=True, exist_ok=True)
            archive.extractall(dest, members=_tracked(archive, names), filter="data")
    except _READ_ERRORS as exc:
        raise ExtractionError(f"Unable to unarchive the payload: {exc}") from exc
    except OSError as exc:
        raise ExtractionError(f"Unable to write archive entry into {dest}: {exc}") from exc

    LOGGER.info("Extracted %d entries into %s", len(names), dest)
    return names
