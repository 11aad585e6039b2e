import sys

from exprtree.cli import main

sys.exit(main())
