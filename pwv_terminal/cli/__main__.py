"""Allow ``python -m pwv_terminal.cli`` execution."""

import sys

from pwv_terminal.cli.terminal import main

sys.exit(main())
