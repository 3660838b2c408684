"""Entry point for ``python -m primlib``."""

import sys

from primlib.cli import main

sys.exit(main())
