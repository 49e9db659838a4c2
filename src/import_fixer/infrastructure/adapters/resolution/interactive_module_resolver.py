"""
Module resolver that asks the user, one missing type at a time.
"""
import logging
from typing import Optional, Sequence

from import_fixer.domain.ports.module_resolver import ModuleResolverPort
from import_fixer.domain.ports.ui_service import LogLevel, UIServicePort

logger = logging.getLogger(__name__)


class InteractiveModuleResolver(ModuleResolverPort):
    """
    Prompts for the module of each missing type through the UI.

    Empty or whitespace-only answers re-prompt for the same type. End of input
    is reported to the caller as None.
    """

    def __init__(self, ui: UIServicePort):
        self.ui = ui

    def resolve(self, type_name: str, file_paths: Sequence[str]) -> Optional[str]:
        question = f"What module is {type_name} located in?"
        while True:
            answer = self.ui.prompt(question)
            if answer is None:
                logger.warning(f"Input ended while resolving the module for {type_name}")
                return None
            module = answer.strip()
            if module:
                logger.debug(f"Resolved {type_name} -> {module} for {len(file_paths)} file(s)")
                return module
            self.ui.log("A module name is required.", LogLevel.WARNING)
