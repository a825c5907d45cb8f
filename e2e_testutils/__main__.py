"""Allow ``python -m e2e_testutils``."""

import sys

from e2e_testutils.cli.commands import main

sys.exit(main())
