import sys

from orgchart.cli import main

sys.exit(main())
