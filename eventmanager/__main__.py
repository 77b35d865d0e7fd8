"""Allow ``python -m eventmanager``."""

import sys

from eventmanager.cli import main

sys.exit(main())
