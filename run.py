"""
Entry Point Script (Bootstrap)
==============================
Starts the application from a source checkout without installing it.

It sits outside the 'src' package and puts 'src' on 'sys.path' so that
'from transformviz...' resolves.

Usage:
    $ python run.py [--debug] [--click-only]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from transformviz.__main__ import cli

if __name__ == "__main__":
    sys.exit(cli())
