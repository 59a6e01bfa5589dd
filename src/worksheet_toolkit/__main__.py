"""Allow ``python -m worksheet_toolkit``."""

import sys

from worksheet_toolkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
