from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

from import_fixer.domain.models.broken_reference import BrokenReference


class ErrorParserPort(ABC):
    """Interface for extracting missing-type references from build output."""

    @abstractmethod
    def parse_line(self, line: str) -> Optional[BrokenReference]:
        """
        Parses a single build log line.

        Args:
            line: One line of compiler output, with or without its newline.

        Returns:
            The reference reported by the line, or None if the line is not a
            missing-type error.
        """
        pass

    @abstractmethod
    def scan(self, lines: Iterable[str]) -> Iterator[BrokenReference]:
        """
        Lazily yields one reference per matching line, in input order.
        Non-matching lines are skipped.
        """
        pass
