"""Allow running pelp as `python -m pelp`"""

import sys

from .cli import main

sys.exit(main())
