import sys

from nhlstreams.cli import main

sys.exit(main())
