import sys

from catharsis.cli import main

sys.exit(main())
