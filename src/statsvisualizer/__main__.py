"""Graphical entry point: ``python -m statsvisualizer``."""
import sys

from statsvisualizer.app.main import main

if __name__ == "__main__":
    sys.exit(main())
