"""
Domain models and value objects.

Contains the conversion record produced by the public API.
"""

from bigradix.core.domain.conversion import Conversion

__all__ = [
    "Conversion",
]
