import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterator

from import_fixer.domain.ports.file_system import FileSystemPort

logger = logging.getLogger(__name__)


class FileSystemAdapter(FileSystemPort):
    """Concrete implementation of FileSystemPort using standard Python libraries."""

    def is_readable_file(self, path: str) -> bool:
        return Path(path).is_file() and os.access(path, os.R_OK)

    def is_writable_file(self, path: str) -> bool:
        return Path(path).is_file() and os.access(path, os.W_OK)

    def iter_lines(self, file_path: str) -> Iterator[str]:
        # Undecodable bytes in a build log become U+FFFD
        with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
            for line in f:
                yield line

    def read_file(self, file_path: str) -> str:
        try:
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except Exception as e:
            logger.error(f"Error reading file {file_path}: {e}")
            raise

    def replace_file(self, file_path: str, data: bytes):
        """
        Writes `data` to a temporary file next to `file_path` and renames it
        over the original, keeping the original permission bits.

        A symlink is followed, so its target is rewritten and the link kept.
        When the directory does not allow creating the temporary file, the
        file is truncated and rewritten in place.
        """
        target = Path(os.path.realpath(file_path))
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
        except PermissionError as e:
            logger.debug(f"Cannot create a temporary file next to {target} ({e}); writing in place")
            self._write_in_place(target, data)
            return
        try:
            with os.fdopen(fd, 'wb') as tmp:
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except Exception as e:
            logger.error(f"Error writing file {file_path}: {e}")
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

    def _write_in_place(self, target: Path, data: bytes):
        try:
            with open(target, 'wb') as f:
                f.write(data)
        except Exception as e:
            logger.error(f"Error writing file {target}: {e}")
            raise
