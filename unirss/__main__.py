"""Allow running unirss as a module: python -m unirss."""

import sys

from unirss.cli import main

if __name__ == '__main__':
    sys.exit(main())
