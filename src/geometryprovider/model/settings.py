"""
Builder Settings (Data Model)
=============================
Parameter objects passed into every build call.

The base settings carry placement (position, rotation, scale) and the display
metadata stamped on by the registry. Shape-specific settings extend it and stay
substitutable wherever the base type is expected; the transform stage only
reads the base fields.

Classes:
    GeometryBuilderSettings: Placement shared by every builder.
    CircleGeometryBuilderSettings: Adds the circle side count.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import numbers

from geometryprovider.config import MIN_SIDES, MAX_SIDES, DEFAULT_NUM_SIDES
from geometryprovider.model.geometry_primitives import Vector, Quaternion, Rotation


@dataclass
class GeometryBuilderSettings:
    position: Vector = field(default_factory=Vector)
    # Euler angles in degrees, or a quaternion
    rotation: Rotation = field(default_factory=Vector)
    scale: Vector = field(default_factory=lambda: Vector(1.0, 1.0, 1.0))
    name: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        self.position = Vector.coerce(self.position)
        self.scale = Vector.coerce(self.scale)
        if isinstance(self.rotation, Quaternion):
            self.rotation = replace(self.rotation)
        else:
            self.rotation = Vector.coerce(self.rotation)

    def validate(self) -> None:
        """
        Checks the placement fields. The editor mutates them in place, so this
        runs before every build rather than only at construction.

        Raises:
            TypeError: A field is missing or has the wrong type.
            ValueError: A component is NaN or infinite.
        """
        for label, value in (("position", self.position), ("scale", self.scale)):
            if not isinstance(value, Vector):
                raise TypeError(f"Settings {label} must be a Vector, got {type(value).__name__}.")
            if not value.is_finite():
                raise ValueError(f"Settings {label} must be finite, got {value}.")

        if not isinstance(self.rotation, (Vector, Quaternion)):
            raise TypeError(f"Settings rotation must be a Vector or Quaternion, got {type(self.rotation).__name__}.")
        if not self.rotation.is_finite():
            raise ValueError(f"Settings rotation must be finite, got {self.rotation}.")

    def rotation_quaternion(self) -> Quaternion:
        if isinstance(self.rotation, Quaternion):
            return self.rotation.normalize()
        return Quaternion.from_euler(self.rotation)


@dataclass
class CircleGeometryBuilderSettings(GeometryBuilderSettings):
    num_sides: int = DEFAULT_NUM_SIDES

    def effective_num_sides(self) -> int:
        """
        Side count actually used for the build.

        Counts below MIN_SIDES (including zero and negatives) are clamped up.

        Raises:
            TypeError: `num_sides` is not an integer.
            ValueError: `num_sides` is larger than MAX_SIDES.
        """
        n = self.num_sides
        # bool is an Integral, but never a meaningful side count
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"num_sides must be an integer, got {n!r}.")
        if n > MAX_SIDES:
            raise ValueError(f"num_sides must be at most {MAX_SIDES}, got {n}.")
        return max(MIN_SIDES, int(n))
