"""Text transform rule interface.

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor
from .rules import NullTransform, TransformRule

__all__ = ["Cursor", "NullTransform", "TransformRule"]
