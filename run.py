"""
Entry Point Script (Bootstrap)
==============================
Convenience runner for development, without installing the package.

It adds the 'src' directory to 'sys.path' so that imports like
'from kochsnowflake.snowflake import koch' resolve.

Usage:
    $ python run.py --level 3 --output-dir figures
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from kochsnowflake.main import main

if __name__ == "__main__":
    sys.exit(main())
