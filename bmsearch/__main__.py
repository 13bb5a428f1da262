import sys

from bmsearch.cli import main

sys.exit(main())
