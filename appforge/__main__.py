"""Allow ``python -m appforge``."""

import sys

from appforge.cli import main

sys.exit(main())
