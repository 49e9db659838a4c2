import argparse
from typing import List, Optional


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Configures and parses command line arguments for the application.

    Args:
        argv: Arguments to parse; defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: An object containing the parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="fix-imports",
        description="Scans a build log for \"cannot find '<type>' in scope\" errors, asks which module "
                    "each missing type lives in, and adds the import to every affected file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--build-file",
        help="Build output containing the 'cannot find <type> in scope' errors. "
             "Defaults to build_log.default_path from the configuration (output.txt)."
    )
    parser.add_argument(
        "--config",
        help="YAML configuration file. Defaults to config/application.yml when present."
    )
    parser.add_argument(
        "--modules",
        help="YAML file mapping missing type names to module names. Types not listed "
             "are asked for interactively."
    )
    parser.add_argument(
        "--extension",
        help="Source file extension reported in the build log (e.g. swift)."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would change without writing any file."
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level; overrides logging.level from the configuration."
    )

    return parser.parse_args(argv)
