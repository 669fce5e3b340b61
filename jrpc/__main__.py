"""Allow running as `python -m jrpc`."""

import sys

from jrpc.cli import main

if __name__ == "__main__":
    sys.exit(main())
