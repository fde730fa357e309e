"""Allow ``python -m tagrename``."""

import sys

from tagrename.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
