"""Version file - managed by setuptools-scm.

This file is a placeholder for running from source and is overwritten during
builds with the version setuptools-scm derives from the latest git tag.
"""

from typing import Tuple

__version__ = "0.0.0+unknown"
__version_tuple__: Tuple[int, int, int] = (0, 0, 0)
