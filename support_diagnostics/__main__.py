"""Allow ``python -m support_diagnostics`` invocation."""

import sys

from support_diagnostics.main import main

if __name__ == "__main__":
    sys.exit(main())
