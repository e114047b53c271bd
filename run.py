"""
Entry Point Script (Bootstrap)
==============================
Starts the visualizer from a source checkout without installing it.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It puts 'src' on 'sys.path' so 'from statsvisualizer...' resolves.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'statsvisualizer.StatisticalTextVisualizer'  # Arbitrary string
try:
    # Own taskbar icon grouping on Windows
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from statsvisualizer.app.main import main

if __name__ == "__main__":
    sys.exit(main())
