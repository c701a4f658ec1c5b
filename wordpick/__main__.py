import sys

from wordpick.tui import main

sys.exit(main())
