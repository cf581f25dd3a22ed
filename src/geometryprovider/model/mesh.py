"""
Mesh buffers written by the builders.
"""
from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@runtime_checkable
class MeshTarget(Protocol):
    """
    Anything a builder can write into.

    Targets may additionally expose `clear()`, `set_normals(normals)` and
    `set_uvs(uvs)`; the transform stage calls them when present.
    """
    def set_vertices(self, vertices: npt.NDArray[np.float64]) -> None: ...
    def set_triangles(self, triangles: npt.NDArray[np.int32]) -> None: ...


def validate_buffers(vertices: npt.ArrayLike, triangles: npt.ArrayLike) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.int32]]:
    """
    Normalizes raw buffers to numpy arrays and checks the triangle-list invariants.

    Returns:
        Copies of the buffers as `(N, 3)` float64 and flat int32 arrays.

    Raises:
        ValueError: Wrong shapes, an incomplete triangle, or an index out of range.
    """
    verts = np.array(vertices, dtype=np.float64)
    if verts.size == 0:
        verts = verts.reshape(0, 3)
    if verts.ndim != 2 or verts.shape[1] != 3:
        raise ValueError(f"Vertices must have shape (N, 3), got {verts.shape}.")

    tris = np.array(triangles, dtype=np.int64).ravel()
    if len(tris) % 3 != 0:
        raise ValueError(f"Triangle list length must be a multiple of 3, got {len(tris)}.")
    if len(tris) and (tris.min() < 0 or tris.max() >= len(verts)):
        raise ValueError(f"Triangle indices must lie in [0, {len(verts)}).")

    return verts, tris.astype(np.int32)


class Mesh:
    """
    In-memory mesh: vertex positions, a flat triangle index list and the
    derived normals and UVs.
    """

    def __init__(self, name: str = "Primitive") -> None:
        self.name = name
        self.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', vertices={self.vertex_count}, triangles={self.triangle_count})"

    def clear(self) -> None:
        self.vertices: npt.NDArray[np.float64] = np.zeros((0, 3), dtype=np.float64)
        self.triangles: npt.NDArray[np.int32] = np.zeros(0, dtype=np.int32)
        self.normals: npt.NDArray[np.float64] = np.zeros((0, 3), dtype=np.float64)
        self.uvs: npt.NDArray[np.float64] = np.zeros((0, 2), dtype=np.float64)

    def set_vertices(self, vertices: npt.NDArray[np.float64]) -> None:
        self.vertices = np.array(vertices, dtype=np.float64).reshape(-1, 3)

    def set_triangles(self, triangles: npt.NDArray[np.int32]) -> None:
        tris = np.array(triangles, dtype=np.int32).ravel()
        if len(tris) and tris.max() >= len(self.vertices):
            raise ValueError("Triangle index out of range; set vertices before triangles.")
        self.triangles = tris

    def set_normals(self, normals: npt.NDArray[np.float64]) -> None:
        self.normals = np.array(normals, dtype=np.float64).reshape(-1, 3)

    def set_uvs(self, uvs: npt.NDArray[np.float64]) -> None:
        self.uvs = np.array(uvs, dtype=np.float64).reshape(-1, 2)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    @property
    def faces(self) -> npt.NDArray[np.int32]:
        """Triangles as an (M, 3) array."""
        return self.triangles.reshape(-1, 3)

    def validate(self) -> None:
        validate_buffers(self.vertices, self.triangles)
