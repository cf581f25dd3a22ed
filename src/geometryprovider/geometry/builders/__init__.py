"""Primitive builders."""

from .base import GeometryBuilder, StandardGeometryBuilder
from .circle import CircleGeometryBuilder
from .quad import QuadGeometryBuilder

__all__ = [
    "GeometryBuilder",
    "StandardGeometryBuilder",
    "CircleGeometryBuilder",
    "QuadGeometryBuilder",
]
