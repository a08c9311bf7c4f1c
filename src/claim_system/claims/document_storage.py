from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path
from typing import Iterable, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..core.constants import DEFAULT_DOCUMENT_EXTENSIONS, DEFAULT_MAX_UPLOAD_MB
from ..core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

UPLOAD_SUBDIR = "uploads"


def has_file(file: Optional[FileStorage]) -> bool:
    """A form posts an empty FileStorage when no attachment was chosen."""

    return file is not None and bool(file.filename)


class DocumentStorage:
    """Stores supporting documents under `<root>/uploads`.

    Claims keep the path relative to `root`, e.g. `uploads/3f2a..._timesheet.pdf`.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        allowed_extensions: Iterable[str] = DEFAULT_DOCUMENT_EXTENSIONS,
        max_bytes: int = DEFAULT_MAX_UPLOAD_MB * 1024 * 1024,
    ):
        self._root = Path(root).resolve()
        self._allowed = {e.lower().lstrip(".") for e in allowed_extensions}
        self._max_bytes = int(max_bytes)

    @property
    def allowed_extensions(self) -> list[str]:
        return sorted(self._allowed)

    @staticmethod
    def _size(file: FileStorage) -> int:
        stream = file.stream
        pos = stream.tell()
        stream.seek(0, os.SEEK_END)
        size = stream.tell()
        stream.seek(pos)
        return size

    def validate(self, file: FileStorage) -> Optional[str]:
        """Return an error message, or None when the file can be stored."""

        name = secure_filename(file.filename or "")
        ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
        if ext not in self._allowed:
            return f"Only {', '.join('.' + e for e in self.allowed_extensions)} files are allowed"
        if self._size(file) > self._max_bytes:
            return f"File must be smaller than {self._max_bytes // (1024 * 1024)} MB"
        return None

    def save(self, file: FileStorage) -> str:
        target_dir = self._root / UPLOAD_SUBDIR
        target_dir.mkdir(parents=True, exist_ok=True)

        stored_name = f"{uuid.uuid4().hex}_{secure_filename(file.filename or '')}"
        file.save(str(target_dir / stored_name))
        logger.info("Stored supporting document %s", stored_name)
        return f"{UPLOAD_SUBDIR}/{stored_name}"

    def resolve(self, relative_path: str) -> Path:
        path = (self._root / relative_path).resolve()
        if self._root not in path.parents or not path.is_file():
            raise NotFoundError("Supporting document not found")
        return path

    def delete(self, relative_path: str) -> None:
        path = (self._root / relative_path).resolve()
        if self._root in path.parents and path.exists():
            path.unlink()
            logger.info("Removed supporting document %s", relative_path)
