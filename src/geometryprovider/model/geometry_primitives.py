"""
Geometric Primitives for placement settings.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterable, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class Vector:
    """
    A vector in 3D space. Used for positions, scales and euler angles.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def coerce(cls, value: Union[Vector, Iterable[float]]) -> Vector:
        """Accepts a Vector or any 3-sequence of numbers."""
        if isinstance(value, Vector):
            # Settings own their vectors; the editor edits them in place
            return replace(value)
        if value is None or isinstance(value, (str, bytes)):
            raise TypeError(f"Cannot convert {value!r} to a Vector.")
        components = list(value)
        if len(components) != 3:
            raise ValueError(f"A Vector needs 3 components, got {len(components)}.")
        return cls(*(float(c) for c in components))

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return self * (1.0 / mag)

    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in (self.x, self.y, self.z))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass
class Quaternion:
    """
    A rotation quaternion (w + xi + yj + zk).
    Right-handed, rotations are counter-clockwise looking down the axis.
    """
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector, angle_rad: float) -> Quaternion:
        """Rotation of `angle_rad` radians around `axis`."""
        n = axis.normalize()
        if n.magnitude == 0.0:
            raise ValueError("Rotation axis must be non-zero.")
        half = 0.5 * angle_rad
        s = math.sin(half)
        return cls(math.cos(half), n.x * s, n.y * s, n.z * s)

    @classmethod
    def from_euler(cls, degrees: Vector) -> Quaternion:
        """
        Builds a rotation from euler angles in degrees.

        The angles are applied around Z first, then X, then Y.
        """
        qx = cls.from_axis_angle(Vector(1.0, 0.0, 0.0), math.radians(degrees.x))
        qy = cls.from_axis_angle(Vector(0.0, 1.0, 0.0), math.radians(degrees.y))
        qz = cls.from_axis_angle(Vector(0.0, 0.0, 1.0), math.radians(degrees.z))
        return qy * qx * qz

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product; (a * b) rotates by b first, then a."""
        return Quaternion(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    @property
    def norm(self) -> float:
        return math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Quaternion:
        n = self.norm
        if n == 0.0 or not math.isfinite(n):
            raise ValueError(f"Cannot normalize quaternion {self}.")
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)

    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in (self.w, self.x, self.y, self.z))

    def to_matrix(self) -> npt.NDArray[np.float64]:
        """3x3 rotation matrix acting on column vectors."""
        q = self.normalize()
        w, x, y, z = q.w, q.x, q.y, q.z
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ], dtype=np.float64)

    def rotate(self, vector: Vector) -> Vector:
        v = self.to_matrix() @ vector.to_array()
        return Vector(float(v[0]), float(v[1]), float(v[2]))


# Settings accept either form
Rotation = Union[Vector, Quaternion]
