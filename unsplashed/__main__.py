"""
__main__.py

This file adds support for running unsplashed as a python module instead of invoking the
"unsplashed" command line entrypoint:

    python -m unsplashed random
"""

from unsplashed.cli import main


if __name__ == "__main__":
    main()
