import sys
from pathlib import Path

# Ensure the src directory is in the Python path when running from a checkout
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from import_fixer.cli.main import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
