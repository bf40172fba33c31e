"""Allow ``python -m calclex``."""

import sys

from calclex.cli import main

sys.exit(main())
