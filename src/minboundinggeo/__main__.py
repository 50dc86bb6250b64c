"""Command-line interface."""
import sys

from minboundinggeo.main import main

if __name__ == "__main__":
    sys.exit(main())
