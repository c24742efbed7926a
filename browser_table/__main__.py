import sys

from browser_table.cli import main

sys.exit(main())
