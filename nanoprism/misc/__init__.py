"""
Miscellaneous utilities for nanoprism.
"""

from .options import prismoptions, getprismoptions

__all__ = [
    'prismoptions', 'getprismoptions',
]
