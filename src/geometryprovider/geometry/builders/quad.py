from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from geometryprovider.geometry.builders.base import StandardGeometryBuilder
from geometryprovider.model.settings import GeometryBuilderSettings

if TYPE_CHECKING:
    from geometryprovider.model.mesh import MeshTarget

logger = logging.getLogger(__name__)

# Unit square in the X-Z plane
QUAD_VERTICES = np.array([
    [-0.5, 0.0, -0.5],
    [0.5, 0.0, -0.5],
    [0.5, 0.0, 0.5],
    [-0.5, 0.0, 0.5],
], dtype=np.float64)

QUAD_TRIANGLES = np.array([
    0, 2, 1,
    0, 3, 2,
], dtype=np.int32)


class QuadGeometryBuilder(StandardGeometryBuilder):
    """Builds a unit quad. Only the shared placement settings apply."""
    SETTINGS_TYPE = GeometryBuilderSettings

    def _build(self, mesh: MeshTarget, settings: GeometryBuilderSettings) -> None:
        logger.debug("Building quad.")
        self.transform_and_apply(mesh, QUAD_VERTICES.copy(), QUAD_TRIANGLES.copy(), settings)
