import sys

from humanshuffle.cli import main

sys.exit(main())
