#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""Alternative entry point for python -m irsacheck execution.

Usage:
    python -m irsacheck --log-level INFO

This is equivalent to:
    irsacheck --log-level INFO
"""

import sys

from irsacheck.cli import main


if __name__ == "__main__":
    sys.exit(main())
