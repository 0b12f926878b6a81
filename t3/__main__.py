"""Allow ``python -m t3``."""

import sys

from t3.cli.main import main


if __name__ == '__main__':
    sys.exit(main())
