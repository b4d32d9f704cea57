import sys

from gl_cloner.cli import main

sys.exit(main())
