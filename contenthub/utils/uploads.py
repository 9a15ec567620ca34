# contenthub/utils/uploads.py

import logging
import os
import re
import uuid
from dataclasses import dataclass
from typing import List, Optional

from fastapi import UploadFile

from contenthub.core.config import settings

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
_EXTENSION_RE = re.compile(r"\.[A-Za-z0-9]{1,10}")


class UploadRejected(Exception):
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


@dataclass
class StoredFile:
    filename: str
    original_name: str
    mime_type: str
    size: int

    @property
    def url(self) -> str:
        return f"/uploads/{self.filename}"


def get_upload_dir() -> str:
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    return settings.UPLOAD_DIR


def generate_filename(original_name: str) -> str:
    """<uuid4><ext>, keeping the original extension only when it looks sane"""
    ext = os.path.splitext(os.path.basename(original_name or ""))[1]
    if not _EXTENSION_RE.fullmatch(ext):
        ext = ""
    return f"{uuid.uuid4()}{ext.lower()}"


def save_upload(upload: UploadFile) -> StoredFile:
    """
    Stream an uploaded file to the upload directory.

    Raises:
        UploadRejected: 400 for a mime type outside the allow-list, 413 when the
            file is larger than MAX_UPLOAD_SIZE. Nothing is left on disk.
    """
    mime_type = upload.content_type or "application/octet-stream"
    if mime_type not in settings.ALLOWED_UPLOAD_TYPES:
        logger.warning(f"Rejected upload {upload.filename!r} with type {mime_type}")
        raise UploadRejected(400, "Invalid file type")

    filename = generate_filename(upload.filename)
    path = os.path.join(get_upload_dir(), filename)
    size = 0
    try:
        with open(path, "wb") as out:
            while True:
                chunk = upload.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > settings.MAX_UPLOAD_SIZE:
                    raise UploadRejected(413, "File too large")
                out.write(chunk)
    except BaseException:
        remove_upload(filename)
        raise

    logger.info(f"Stored upload {upload.filename!r} as {filename} ({size} bytes)")
    return StoredFile(
        filename=filename,
        original_name=upload.filename or filename,
        mime_type=mime_type,
        size=size,
    )


def save_uploads(uploads: Optional[List[UploadFile]]) -> List[StoredFile]:
    """Store several files; when one is rejected the ones already stored are removed."""
    uploads = [upload for upload in (uploads or []) if upload.filename]
    if len(uploads) > settings.MAX_FILES_PER_REQUEST:
        raise UploadRejected(400, f"At most {settings.MAX_FILES_PER_REQUEST} files per request")

    stored = []
    try:
        for upload in uploads:
            stored.append(save_upload(upload))
    except UploadRejected:
        for item in stored:
            remove_upload(item.filename)
        raise
    return stored


def remove_upload(filename: Optional[str]) -> None:
    if not filename:
        return
    path = os.path.join(settings.UPLOAD_DIR, os.path.basename(filename))
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Could not remove upload {path}: {e}")
