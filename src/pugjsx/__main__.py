import sys

from pugjsx.cli import main

sys.exit(main())
