import sys

from cityweather.cli import main

sys.exit(main())
