from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from geometryprovider.geometry.builders.base import StandardGeometryBuilder
from geometryprovider.model.settings import CircleGeometryBuilderSettings

if TYPE_CHECKING:
    import numpy.typing as npt
    from geometryprovider.model.mesh import MeshTarget

logger = logging.getLogger(__name__)


class CircleGeometryBuilder(StandardGeometryBuilder):
    """
    Builds a flat circle in the X-Z plane as a triangle fan around its center.
    """
    SETTINGS_TYPE = CircleGeometryBuilderSettings

    def _build(self, mesh: MeshTarget, settings: CircleGeometryBuilderSettings) -> None:
        num_sides = settings.effective_num_sides()
        logger.debug(f"Building circle with {num_sides} sides.")

        vertices, triangles = self.build_circle(num_sides)
        self.transform_and_apply(mesh, vertices, triangles, settings)

    @staticmethod
    def calculate_buffer_length(num_sides: int) -> tuple[int, int]:
        """
        Number of vertices and triangles needed for `num_sides`.

        Returns:
            (num_verts, num_triangles): one center vertex plus one per rim
            point, and one triangle per side.
        """
        return num_sides + 1, num_sides

    @staticmethod
    def build_circle(num_sides: int) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.int32]]:
        """
        Local vertex and index buffers of a unit-diameter circle.

        Vertex 0 is the center at the origin. Rim vertex i sits at angle
        2*pi*(i-1)/num_sides, starting on +X and turning towards +Z.
        Triangle k is (rim k, center, rim k+1), wrapping the last one back to
        the first rim vertex, so every face points along +Y.

        Args:
            num_sides: Side count, already clamped.

        Returns:
            (vertices, triangles) as (num_sides + 1, 3) and flat arrays.
        """
        num_verts, num_triangles = CircleGeometryBuilder.calculate_buffer_length(num_sides)

        vertices = np.zeros((num_verts, 3), dtype=np.float64)
        theta = 2.0 * np.pi * np.arange(num_sides) / num_sides
        vertices[1:, 0] = 0.5 * np.cos(theta)
        vertices[1:, 2] = 0.5 * np.sin(theta)

        rim = np.arange(1, num_triangles + 1, dtype=np.int32)
        next_rim = rim % num_sides + 1
        triangles = np.column_stack([rim, np.zeros_like(rim), next_rim]).ravel()

        return vertices, triangles
