import sys

from swoosh_toolkit.cli import main

sys.exit(main())
