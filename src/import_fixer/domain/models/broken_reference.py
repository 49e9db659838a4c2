# src/import_fixer/domain/models/broken_reference.py
"""
Domain models for missing-type references found in a build log and the
outcome of patching the affected files.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set


@dataclass(frozen=True)
class BrokenReference:
    """One (type, file) pair extracted from a single build log line."""
    type: str
    file_path: str


class BrokenReferenceIndex:
    """
    Mapping from missing-type name to the set of files reporting it.

    Every path stored under a type came from at least one log line reporting
    that type missing in that path.
    """

    def __init__(self):
        self._paths_by_type: Dict[str, Set[str]] = {}

    def add(self, reference: BrokenReference) -> None:
        """Adds a reference. Adding the same (type, path) twice is a no-op."""
        self._paths_by_type.setdefault(reference.type, set()).add(reference.file_path)

    def types(self) -> List[str]:
        """Returns the distinct missing types, sorted."""
        return sorted(self._paths_by_type)

    def paths_for(self, type_name: str) -> List[str]:
        """Returns the files reporting `type_name` missing, sorted."""
        return sorted(self._paths_by_type.get(type_name, ()))

    def as_dict(self) -> Dict[str, Set[str]]:
        return {type_name: set(paths) for type_name, paths in self._paths_by_type.items()}

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._paths_by_type

    def __len__(self) -> int:
        return len(self._paths_by_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BrokenReferenceIndex):
            return NotImplemented
        return self._paths_by_type == other._paths_by_type

    def __repr__(self) -> str:
        return f"BrokenReferenceIndex({self.as_dict()!r})"


class PatchStatus(Enum):
    """Outcome of patching a single file."""
    PATCHED = "patched"
    WOULD_PATCH = "would_patch"          # Dry run, nothing written
    ALREADY_PRESENT = "already_present"  # Exact import line already in the file
    NO_ANCHOR = "no_anchor"              # No existing 'import' to insert before
    UNWRITABLE = "unwritable"            # File missing or not writable
    ENCODE_FAILED = "encode_failed"
    FAILED = "failed"                    # Read, decode or write error

    @property
    def is_failure(self) -> bool:
        return self is PatchStatus.FAILED


@dataclass
class PatchResult:
    """Result of adding one import line to one file."""
    file_path: str
    module: str
    status: PatchStatus
    message: str = ""


@dataclass
class FixImportsReport:
    """Summary of a complete run."""
    index: BrokenReferenceIndex
    modules: Dict[str, str] = field(default_factory=dict)
    results: Dict[str, List[PatchResult]] = field(default_factory=dict)

    def all_results(self) -> List[PatchResult]:
        return [result for type_name in sorted(self.results) for result in self.results[type_name]]

    def results_with(self, status: PatchStatus) -> List[PatchResult]:
        return [result for result in self.all_results() if result.status is status]

    @property
    def has_failures(self) -> bool:
        return any(result.status.is_failure for result in self.all_results())
