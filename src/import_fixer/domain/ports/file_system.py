from abc import ABC, abstractmethod
from typing import Iterator


class FileSystemPort(ABC):
    """Interface for interacting with the file system."""

    @abstractmethod
    def is_readable_file(self, path: str) -> bool:
        """Checks that `path` is a regular file the process can read."""
        pass

    @abstractmethod
    def is_writable_file(self, path: str) -> bool:
        """Checks that `path` is a regular file the process can open for writing."""
        pass

    @abstractmethod
    def iter_lines(self, file_path: str) -> Iterator[str]:
        """Streams a text file line by line. The file is closed when iteration ends."""
        pass

    @abstractmethod
    def read_file(self, file_path: str) -> str:
        """Reads the content of a UTF-8 text file."""
        pass

    @abstractmethod
    def replace_file(self, file_path: str, data: bytes):
        """Atomically replaces the whole content of an existing file."""
        pass
