import sys

from lpfg.cli import main

sys.exit(main())
