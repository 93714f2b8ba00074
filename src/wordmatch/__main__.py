"""Allow ``python -m wordmatch``."""

import sys

from .cli import main

sys.exit(main())
