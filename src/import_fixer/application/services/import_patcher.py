"""
Service that adds a missing import statement to source files.
"""
import logging
from typing import Iterable, List, Optional

from import_fixer.domain.models.broken_reference import PatchResult, PatchStatus
from import_fixer.domain.ports.file_system import FileSystemPort

logger = logging.getLogger(__name__)

IMPORT_ANCHOR = "import"


class ImportPatcher:
    """
    Inserts `import <module>` before the first existing import of a file.

    Each file is handled on its own: a skip or failure on one path never stops
    the remaining paths. Files that already contain the exact import line are
    left byte-for-byte unchanged.
    """

    def __init__(self, file_system: FileSystemPort, dry_run: bool = False):
        """
        Initialize the patcher.

        Args:
            file_system: Port used to read and replace files
            dry_run: When True, compute the change but never write it
        """
        self.fs = file_system
        self.dry_run = dry_run

    @staticmethod
    def compose_import_line(module: str) -> str:
        return f"import {module}\n"

    @staticmethod
    def insert_import(text: str, import_line: str) -> Optional[str]:
        """
        Returns `text` with `import_line` inserted before the first occurrence
        of "import", `text` itself if the line is already present, or None if
        the file has no import to anchor on.
        """
        if import_line in text:
            return text
        anchor = text.find(IMPORT_ANCHOR)
        if anchor == -1:
            return None
        return text[:anchor] + import_line + text[anchor:]

    def patch_files(self, file_paths: Iterable[str], module: str) -> List[PatchResult]:
        return [self.patch_file(path, module) for path in sorted(file_paths)]

    def patch_file(self, file_path: str, module: str) -> PatchResult:
        import_line = self.compose_import_line(module)

        if not self.fs.is_writable_file(file_path):
            return self._skip(file_path, module, PatchStatus.UNWRITABLE,
                              f"Failed to open file for writing. Skipping: {file_path}")

        try:
            text = self.fs.read_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            return self._fail(file_path, module, f"Failed to read {file_path}: {e}")

        if import_line in text:
            logger.debug(f"{file_path} already imports {module}")
            return PatchResult(file_path, module, PatchStatus.ALREADY_PRESENT,
                               f"Already imports {module}: {file_path}")

        new_text = self.insert_import(text, import_line)
        if new_text is None:
            return self._skip(file_path, module, PatchStatus.NO_ANCHOR,
                              "One import stmt is needed in file to know where to add the new import stmt. "
                              f"Skipping: {file_path}")

        try:
            data = new_text.encode("utf-8")
        except UnicodeEncodeError as e:
            return self._skip(file_path, module, PatchStatus.ENCODE_FAILED,
                              f"Failed to convert file contents to data ({e}). Skipping: {file_path}")

        if self.dry_run:
            logger.info(f"Would add 'import {module}' to {file_path}")
            return PatchResult(file_path, module, PatchStatus.WOULD_PATCH,
                               f"Would fix {file_path}")

        try:
            self.fs.replace_file(file_path, data)
        except OSError as e:
            return self._fail(file_path, module, f"Failed to write {file_path}: {e}")

        logger.info(f"Fixed {file_path}")
        return PatchResult(file_path, module, PatchStatus.PATCHED, f"Fixed {file_path}")

    def _skip(self, file_path: str, module: str, status: PatchStatus, message: str) -> PatchResult:
        logger.warning(message)
        return PatchResult(file_path, module, status, message)

    def _fail(self, file_path: str, module: str, message: str) -> PatchResult:
        logger.error(message)
        return PatchResult(file_path, module, PatchStatus.FAILED, message)
