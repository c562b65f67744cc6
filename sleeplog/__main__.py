import sys

from sleeplog.cli import main

sys.exit(main())
