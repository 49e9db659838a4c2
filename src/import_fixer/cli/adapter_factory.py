import logging
from typing import Any, Dict, Optional

from import_fixer.application.services.import_patcher import ImportPatcher
from import_fixer.domain.ports.error_parser import ErrorParserPort
from import_fixer.domain.ports.file_system import FileSystemPort
from import_fixer.domain.ports.module_resolver import ModuleResolverPort
from import_fixer.domain.ports.ui_service import UIServicePort
from import_fixer.infrastructure.adapters.error_parsing.regex_error_parser_adapter import RegexErrorParserAdapter
from import_fixer.infrastructure.adapters.file_system_adapter import FileSystemAdapter
from import_fixer.infrastructure.adapters.resolution.interactive_module_resolver import InteractiveModuleResolver
from import_fixer.infrastructure.adapters.resolution.mapping_module_resolver import (
    MappingModuleResolver, load_module_mapping
)

logger = logging.getLogger(__name__)


def create_file_system_adapter() -> FileSystemPort:
    logger.debug("Creating FileSystemAdapter")
    return FileSystemAdapter()


def create_error_parser(config: Dict[str, Any]) -> ErrorParserPort:
    return RegexErrorParserAdapter(config)


def create_import_patcher(config: Dict[str, Any], file_system: FileSystemPort) -> ImportPatcher:
    dry_run = bool(config.get('patching', {}).get('dry_run', False))
    return ImportPatcher(file_system, dry_run=dry_run)


def create_module_resolver(ui: UIServicePort, modules_path: Optional[str] = None) -> ModuleResolverPort:
    """
    Creates the resolver chain: answers from the mapping file first (if any),
    then interactive prompts.

    Raises:
        ModuleMappingError: The mapping file is unreadable or malformed.
    """
    interactive = InteractiveModuleResolver(ui)
    if not modules_path:
        return interactive
    return MappingModuleResolver(load_module_mapping(modules_path), fallback=interactive)
