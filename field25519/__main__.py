"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details
"""

import sys

from field25519.cli import main


sys.exit(main())
