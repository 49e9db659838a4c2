"""
Regex-based parser for "cannot find '<type>' in scope" compiler errors.
"""
import logging
import re
from typing import Any, Dict, Iterable, Iterator, Optional, Pattern

from import_fixer.domain.models.broken_reference import BrokenReference
from import_fixer.domain.ports.error_parser import ErrorParserPort

logger = logging.getLogger(__name__)

DEFAULT_FILE_EXTENSION = "swift"


def compile_missing_type_pattern(file_extension: str = DEFAULT_FILE_EXTENSION) -> Pattern[str]:
    """
    Builds the pattern for one missing-type error line.

    The path group is greedy, so a path containing colons still parses as long
    as the line ends its location with `<path>.<ext>:<line>:<col>:`.
    """
    extension = re.escape(file_extension.lstrip("."))
    return re.compile(
        rf"^(?P<path>/.+\.{extension}):\d+:\d+: error: cannot find '(?P<name>\w+)' in scope"
    )


class RegexErrorParserAdapter(ErrorParserPort):
    """
    Error parser that matches build log lines against a single compiled pattern.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initializes the adapter.

        Args:
            config: The application configuration dictionary.
        """
        config = config or {}
        self.file_extension = config.get("build_log", {}).get("file_extension", DEFAULT_FILE_EXTENSION)
        self.pattern = compile_missing_type_pattern(self.file_extension)
        logger.debug("RegexErrorParserAdapter initialized for '.%s' files.", self.file_extension.lstrip("."))

    def parse_line(self, line: str) -> Optional[BrokenReference]:
        match = self.pattern.match(line.rstrip("\r\n"))
        if not match:
            return None
        return BrokenReference(type=match.group("name"), file_path=match.group("path"))

    def scan(self, lines: Iterable[str]) -> Iterator[BrokenReference]:
        for line in lines:
            reference = self.parse_line(line)
            if reference is None:
                continue
            logger.info("Broken reference of %s found in: %s", reference.type, reference.file_path)
            yield reference
