"""
Compressed storage format of a replay record.

An archive is a zip container holding exactly one member, `game.json`, with the record's JSON document.
---
NOTE: encode/decode keep the whole document in memory. Fine for a single game; very long games would need
streaming the member instead.
"""

import io
import logging
import zipfile
import zlib
from pathlib import Path

from pydantic import ValidationError

from src.core.exceptions import ArchiveFormatError
from src.replay.view_models import ViewGame

logger = logging.getLogger(__name__)

ARCHIVE_MEMBER_NAME = "game.json"
DEFAULT_COMPRESSLEVEL = 6


def encode(record: ViewGame, compresslevel: int = DEFAULT_COMPRESSLEVEL) -> bytes:
    """Serialize the record and wrap it as the only member of a new zip container."""
    try:
        document = record.model_dump_json(by_alias=True).encode("utf-8")
    except (ValueError, TypeError) as exc:
        raise ArchiveFormatError(f"cannot serialize game {record.game.id}") from exc

    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(
            buffer,
            mode="w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=compresslevel,
        ) as archive:
            archive.writestr(ARCHIVE_MEMBER_NAME, document)
    except (OSError, ValueError, zipfile.LargeZipFile) as exc:
        raise ArchiveFormatError(
            f"cannot write archive for game {record.game.id}"
        ) from exc

    data = buffer.getvalue()
    logger.debug(
        "Encoded game %s: %d bytes of JSON into %d bytes",
        record.game.id,
        len(document),
        len(data),
    )
    return data


def decode(data: bytes) -> ViewGame:
    """Open the container, check it holds a single member and parse that member as a replay record."""
    try:
        archive = zipfile.ZipFile(io.BytesIO(data), mode="r")
    except (zipfile.BadZipFile, OSError, ValueError) as exc:
        logger.warning("Rejected archive of %d bytes: not a zip container", len(data))
        raise ArchiveFormatError("malformed archive") from exc

    with archive:
        members = archive.infolist()
        if len(members) != 1:
            logger.warning("Rejected archive with %d members", len(members))
            raise ArchiveFormatError(
                f"unexpected entry count: got {len(members)}, want 1"
            )
        try:
            document = archive.read(members[0])
        except (
            zipfile.BadZipFile,
            zlib.error,
            OSError,
            EOFError,
            NotImplementedError,
            RuntimeError,
        ) as exc:
            logger.warning(
                "Rejected archive: member %s unreadable", members[0].filename
            )
            raise ArchiveFormatError("malformed archive") from exc

    try:
        record = ViewGame.model_validate_json(document)
    except ValidationError as exc:
        logger.warning("Rejected archive: %d validation errors", exc.error_count())
        raise ArchiveFormatError("malformed document") from exc

    logger.debug("Decoded game %s with %d frames", record.game.id, len(record.frames))
    return record


def write_archive(
    path: Path, record: ViewGame, compresslevel: int = DEFAULT_COMPRESSLEVEL
) -> None:
    path.write_bytes(encode(record, compresslevel))


def read_archive(path: Path) -> ViewGame:
    return decode(path.read_bytes())
