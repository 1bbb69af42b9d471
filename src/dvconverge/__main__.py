import sys

from dvconverge.cli import main

sys.exit(main())
