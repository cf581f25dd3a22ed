"""
Vertex Transform
================
Shared post-processing step run after every builder.

Places raw local-space buffers in the world (rotate, then scale, then
translate), writes them into the caller's mesh and assigns default surface
attributes so the result renders without further setup. Nothing here assumes
a particular topology beyond a valid triangle list.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from geometryprovider.model.mesh import MeshTarget, validate_buffers
from geometryprovider.model.settings import GeometryBuilderSettings

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def transform_vertices(
    vertices: npt.NDArray[np.float64],
    settings: GeometryBuilderSettings
) -> npt.NDArray[np.float64]:
    """
    Maps local vertices to world space.

    Args:
        vertices: (N, 3) local positions.
        settings: Placement source; only the base fields are read.

    Returns:
        A new (N, 3) array.
    """
    rotation = settings.rotation_quaternion().to_matrix()
    rotated = vertices @ rotation.T
    return rotated * settings.scale.to_array() + settings.position.to_array()


def recalculate_normals(
    vertices: npt.NDArray[np.float64],
    triangles: npt.NDArray[np.int32]
) -> npt.NDArray[np.float64]:
    """
    Area-weighted vertex normals.

    Vertices not referenced by any triangle, or only by zero-area ones,
    get a zero normal.
    """
    normals = np.zeros_like(vertices)
    if len(triangles) == 0:
        return normals

    faces = triangles.reshape(-1, 3)
    v0 = vertices[faces[:, 0]]
    v1 = vertices[faces[:, 1]]
    v2 = vertices[faces[:, 2]]
    # Cross product length is twice the area, so larger faces weigh more
    face_normals = np.cross(v1 - v0, v2 - v0)

    for corner in range(3):
        np.add.at(normals, faces[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1)
    # Face normals shrink with the square of the mesh size; only exact
    # cancellation or underflow counts as degenerate
    nonzero = lengths > np.finfo(np.float64).tiny
    normals[nonzero] /= lengths[nonzero][:, np.newaxis]
    normals[~nonzero] = 0.0
    return normals


def planar_uvs(vertices: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Default planar UV mapping.

    Projects along the axis with the smallest extent and stretches the two
    remaining axes over [0, 1] of the bounding box. For the flat X-Z
    primitives this gives u from X and v from Z.
    """
    if len(vertices) == 0:
        return np.zeros((0, 2), dtype=np.float64)

    lo = vertices.min(axis=0)
    extent = vertices.max(axis=0) - lo

    # Stable sort keeps X before Z when Y is the flat axis
    order = np.argsort(-extent, kind="stable")
    u_axis, v_axis = sorted(order[:2])

    uvs = np.zeros((len(vertices), 2), dtype=np.float64)
    for column, axis in enumerate((u_axis, v_axis)):
        if extent[axis] > 0.0:
            uvs[:, column] = (vertices[:, axis] - lo[axis]) / extent[axis]
    return uvs


def apply(
    mesh: MeshTarget,
    vertices: npt.ArrayLike,
    triangles: npt.ArrayLike,
    settings: GeometryBuilderSettings
) -> None:
    """
    Transforms the raw buffers and writes them into `mesh`.

    Args:
        mesh: Target; its previous geometry is replaced, never appended to.
        vertices: (N, 3) local positions.
        triangles: Flat index list, three per triangle.
        settings: Placement; validated before anything is written.

    Raises:
        TypeError, ValueError: Invalid settings or malformed buffers.
    """
    settings.validate()
    local_vertices, tris = validate_buffers(vertices, triangles)

    world_vertices = transform_vertices(local_vertices, settings)

    clear = getattr(mesh, "clear", None)
    if callable(clear):
        clear()
    mesh.set_vertices(world_vertices)
    mesh.set_triangles(tris)

    set_normals = getattr(mesh, "set_normals", None)
    if callable(set_normals):
        set_normals(recalculate_normals(world_vertices, tris))

    set_uvs = getattr(mesh, "set_uvs", None)
    if callable(set_uvs):
        set_uvs(planar_uvs(local_vertices))

    logger.debug(f"Applied {len(world_vertices)} vertices, {len(tris) // 3} triangles.")
