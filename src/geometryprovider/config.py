"""
Configuration & Global Constants
================================
This module serves as the central place for the numeric limits and fallback
strings shared by the builders, the transform stage and the registry.

Exports:
    MIN_SIDES (int): Smallest side count a circle is built with.
    MAX_VERTICES (int): Largest vertex buffer a single build may produce.
    MAX_SIDES (int): Largest side count a circle accepts.
    DEFAULT_DESCRIPTION (str): Placeholder for variants without a description.
"""

# Side counts below this are clamped up
MIN_SIDES: int = 3

# 16-bit index buffers address at most 65535 vertices
MAX_VERTICES: int = 65535

# One vertex is reserved for the circle center
MAX_SIDES: int = MAX_VERTICES - 1

DEFAULT_DESCRIPTION: str = "[No description]"

# Default side count of a freshly created circle
DEFAULT_NUM_SIDES: int = 16
