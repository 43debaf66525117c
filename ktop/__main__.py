"""Allow ``python -m ktop``."""

import sys

from ktop.main import main

sys.exit(main())
