"""
dirtymap - Change-tracking key/value maps

A dict-like container that records which keys were written since the last
reset, comparing values shallowly (value equality for scalars, identity for
everything else) so callers can persist only what changed.
"""

__version__ = "0.1.0"

from .equality import SCALAR_TYPES, is_scalar, shallow_equal
from .tracked_map import TrackedMap, tracked_map

__all__ = [
    # Container
    "TrackedMap",
    "tracked_map",
    # Comparison
    "shallow_equal",
    "is_scalar",
    "SCALAR_TYPES",
]
