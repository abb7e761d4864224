"""
project: levelgen
module: __init__.py
License: MIT

Symmetric dungeon level generator. The generator itself lives in
``levelgen.level``; this package only carries shared helpers such as the
structured logger.
"""

__version__ = "0.1.0"
