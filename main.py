"""Root-level entry point.

Runs the map builder without installing the package:

    python main.py --feed day --output maps/day.html
"""

import sys

from quakemap.main import main


if __name__ == "__main__":
    sys.exit(main())
