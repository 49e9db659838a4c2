"""
Non-interactive module resolver backed by a pre-supplied mapping.
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

import yaml

from import_fixer.domain.ports.module_resolver import ModuleResolverPort

logger = logging.getLogger(__name__)


class ModuleMappingError(Exception):
    """Raised when a module mapping file cannot be read or is malformed."""
    pass


def load_module_mapping(mapping_path: str) -> Dict[str, str]:
    """
    Loads a YAML mapping of missing type name to module name.

    Example file:
        Foo: Bar
        Baz: Networking
    """
    path = Path(mapping_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ModuleMappingError(f"Cannot read module mapping {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ModuleMappingError(f"Invalid YAML in module mapping {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ModuleMappingError(f"Module mapping {path} must be a mapping of type name to module name.")

    mapping = {}
    for type_name, module in data.items():
        if not isinstance(module, str) or not module.strip():
            raise ModuleMappingError(f"Module for '{type_name}' in {path} must be a non-empty string.")
        mapping[str(type_name)] = module.strip()
    logger.info(f"Loaded {len(mapping)} module assignments from {path}")
    return mapping


class MappingModuleResolver(ModuleResolverPort):
    """Resolves types from a fixed mapping, delegating unknown types to a fallback."""

    def __init__(self, mapping: Dict[str, str], fallback: Optional[ModuleResolverPort] = None):
        self.mapping = dict(mapping)
        self.fallback = fallback

    def resolve(self, type_name: str, file_paths: Sequence[str]) -> Optional[str]:
        module = self.mapping.get(type_name)
        if module:
            logger.info(f"Using mapped module {module} for {type_name}")
            return module
        if self.fallback is None:
            logger.warning(f"No module mapped for {type_name}")
            return None
        return self.fallback.resolve(type_name, file_paths)
