"""Command-line interface."""
import sys

from rootwords.app.main import main

if __name__ == "__main__":
    sys.exit(main())
