import sys

from wikipedia_events.cli import main

sys.exit(main())
