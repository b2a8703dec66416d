"""Local storage for uploaded NFT pictures."""

import logging
import os
import tempfile
from pathlib import Path
from typing import BinaryIO

from app.services.errors import InternalError, ValidationError

logger = logging.getLogger(__name__)

COPY_CHUNK_BYTES = 64 * 1024


def safe_filename(filename: str | None) -> str | None:
    """
    Return filename if it names a plain file (no directory parts), else None.
    """
    if not filename:
        return None
    name = Path(filename.replace("\\", "/")).name
    if not name or name in (".", ".."):
        return None
    return name


def save_upload(
    fileobj: BinaryIO,
    filename: str | None,
    upload_dir: Path,
    max_bytes: int,
) -> str:
    """
    Write an uploaded picture under upload_dir keyed by its original filename.

    The upload is streamed to a temporary file and moved over any file with the
    same name only once it is within max_bytes; a rejected upload leaves the
    existing file untouched. Returns the stored filename.
    """
    name = safe_filename(filename)
    if name is None:
        raise ValidationError("Picture must have a filename.")

    target = upload_dir / name
    tmp_path: Path | None = None
    try:
        upload_dir.mkdir(parents=True, exist_ok=True)
        written = 0
        with tempfile.NamedTemporaryFile(
            dir=upload_dir, prefix=".upload-", delete=False
        ) as out:
            tmp_path = Path(out.name)
            while chunk := fileobj.read(COPY_CHUNK_BYTES):
                written += len(chunk)
                if written > max_bytes:
                    break
                out.write(chunk)
        if written <= max_bytes:
            os.replace(tmp_path, target)
            tmp_path = None
    except OSError as e:
        logger.exception("Failed to store upload %s", name)
        raise InternalError("Could not store picture.") from e
    finally:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)

    if written > max_bytes:
        raise ValidationError(f"Picture must not exceed {max_bytes} bytes.")
    logger.info("Stored upload %s (%s bytes)", name, written)
    return name


def resolve_upload(filename: str, upload_dir: Path) -> Path | None:
    """Return the on-disk path of a stored picture, or None if it does not exist."""
    name = safe_filename(filename)
    if name is None or name != filename:
        return None
    path = upload_dir / name
    if not path.is_file():
        return None
    return path

