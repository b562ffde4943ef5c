"""Allow ``python -m disk_scheduling``."""

import sys

from disk_scheduling.cli import main

sys.exit(main())
