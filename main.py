"""Entry point for opening Java class sources from the command line."""

import sys

from class_opener.cli import main

if __name__ == "__main__":
    sys.exit(main())
