"""Allow running as ``python -m serialmonitor``."""

import sys

from serialmonitor import main

sys.exit(main())
