"""Entry point for ``python -m charge_rate_engine``."""

import sys

from charge_rate_engine.cli import main

if __name__ == "__main__":
    sys.exit(main())
