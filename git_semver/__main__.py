"""
Entry point for python -m git_semver

Allows running the package as a module:
    python -m git_semver v0.9.8-760-gabcd1234
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
