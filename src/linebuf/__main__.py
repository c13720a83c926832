import sys

from linebuf.cli import main

sys.exit(main())
