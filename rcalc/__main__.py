import sys

from rcalc.cli import main

sys.exit(main())
