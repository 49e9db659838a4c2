import logging
import sys
from pathlib import Path
from typing import List, Optional

from import_fixer.cli.commands.argument_parser import parse_arguments
from import_fixer.cli.commands.config_loader import (
    apply_cli_overrides, ensure_app_directories, load_and_resolve_config
)
from import_fixer.cli.commands.fix_command import handle_fix
from import_fixer.cli.commands.logging_setup import setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the `fix-imports` command."""
    args = parse_arguments(argv)

    # Relative paths (config, build log, log file) are taken from the working directory
    base_dir = Path.cwd()
    config = load_and_resolve_config(base_dir, args.config)
    apply_cli_overrides(config, args, base_dir)
    ensure_app_directories(config)
    setup_logging(config)

    logger = logging.getLogger(__name__)
    logger.info("--- Starting Import Fixer ---")
    return handle_fix(args, config)


if __name__ == "__main__":
    sys.exit(main())
