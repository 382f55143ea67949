"""Domain layer: nil detection, equality engine, model, ports, exceptions.

Pure Python, no framework imports.
"""

from ischeck.domain.equality import deep_equal
from ischeck.domain.nilness import is_nil

__all__ = ["deep_equal", "is_nil"]
