"""
PyVista export of built meshes, used by preview surfaces.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyvista as pv

from geometryprovider.model.mesh import Mesh

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def mesh_to_polydata(mesh: Mesh) -> pv.PolyData:
    """
    Convert a Mesh into a triangulated PolyData.

    Normals and UVs are attached as point data when they match the vertex count.
    """
    if mesh.vertex_count == 0:
        return pv.PolyData()
    if mesh.triangle_count == 0:
        return pv.PolyData(mesh.vertices.copy())

    faces = np.hstack([
        np.full((mesh.triangle_count, 1), 3, dtype=np.int64),
        mesh.faces.astype(np.int64)
    ]).ravel()
    polydata = pv.PolyData(mesh.vertices.copy(), faces)

    if len(mesh.normals) == mesh.vertex_count:
        polydata.point_data["Normals"] = mesh.normals
    if len(mesh.uvs) == mesh.vertex_count:
        polydata.active_texture_coordinates = mesh.uvs

    return polydata


class PolyDataTarget(Mesh):
    """
    Mesh target that keeps a PyVista PolyData in sync after every build,
    so a preview can pass it straight to `build`.
    """

    def __init__(self, name: str = "Preview") -> None:
        self.polydata: pv.PolyData = pv.PolyData()
        super().__init__(name)

    def set_vertices(self, vertices: npt.NDArray[np.float64]) -> None:
        super().set_vertices(vertices)
        self._sync()

    def set_triangles(self, triangles: npt.NDArray[np.int32]) -> None:
        super().set_triangles(triangles)
        self._sync()

    def set_normals(self, normals: npt.NDArray[np.float64]) -> None:
        super().set_normals(normals)
        self._sync()

    def set_uvs(self, uvs: npt.NDArray[np.float64]) -> None:
        super().set_uvs(uvs)
        self._sync()

    def _sync(self) -> None:
        self.polydata = mesh_to_polydata(self)
        logger.debug(f"Preview '{self.name}' updated: {self.polydata.n_points} points, {self.polydata.n_cells} cells.")
