import sys

from samehash.cli import main

sys.exit(main())
