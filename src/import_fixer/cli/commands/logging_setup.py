import logging
import sys
from typing import Dict, Any

from rich.console import Console
from rich.logging import RichHandler

from import_fixer.infrastructure.adapters.ui.rich_ui_adapter import THEME


def setup_logging(config: Dict[str, Any]):
    """Configures logging based on the application configuration."""
    log_config = config.get('logging', {})
    level_name = str(log_config.get('level', 'WARNING')).upper()
    level = getattr(logging, level_name, logging.WARNING)
    log_format = log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    log_file = log_config.get('log_file')  # Path is already resolved

    ui_config = config.get('ui', {})
    enhanced_logging = ui_config.get('enhanced_logging', True)

    if enhanced_logging:
        # stdout carries the prompts
        console = Console(theme=THEME, stderr=True)
        console_handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(log_format))

    handlers = [console_handler]
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(log_format))
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not configure file logging to {log_file}: {e}", file=sys.stderr)

    # Use force=True to allow reconfiguration if called multiple times (e.g., in tests)
    logging.basicConfig(level=level, handlers=handlers, force=True)

    logging.getLogger(__name__).debug(f"Logging configured. Level: {level_name}, File: {log_file or 'None'}")
