from abc import ABC, abstractmethod
from typing import Optional, Sequence


class ModuleResolverPort(ABC):
    """Interface for mapping a missing type to the module that declares it."""

    @abstractmethod
    def resolve(self, type_name: str, file_paths: Sequence[str]) -> Optional[str]:
        """
        Resolves the module for a missing type.

        Args:
            type_name: The identifier the compiler could not find.
            file_paths: Files reporting the type missing, for display purposes.

        Returns:
            A non-empty module name, or None when no more answers can be
            obtained (end of input).
        """
        pass
