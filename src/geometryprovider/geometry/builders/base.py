from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from geometryprovider.geometry import transform
from geometryprovider.model.settings import GeometryBuilderSettings

if TYPE_CHECKING:
    import numpy.typing as npt
    from geometryprovider.model.mesh import MeshTarget


class GeometryBuilder(ABC):
    """
    Abstract base class for primitive builders.
    """
    # Settings class this builder expects; subclasses of it are accepted too
    SETTINGS_TYPE: type[GeometryBuilderSettings] = GeometryBuilderSettings

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def build(self, mesh: MeshTarget, settings: GeometryBuilderSettings) -> None:
        """
        Builds the primitive into `mesh`, replacing its geometry.

        Args:
            mesh: Target mesh.
            settings: Settings of the type named by SETTINGS_TYPE.

        Raises:
            TypeError: `settings` is not a SETTINGS_TYPE instance.
        """
        if not isinstance(settings, self.SETTINGS_TYPE):
            raise TypeError(
                f"{self.__class__.__name__} expects {self.SETTINGS_TYPE.__name__}, "
                f"got {type(settings).__name__}."
            )
        settings.validate()
        self._build(mesh, settings)

    @abstractmethod
    def _build(self, mesh: MeshTarget, settings: GeometryBuilderSettings) -> None:
        """Shape-specific part of `build`; settings are already checked."""
        pass


class StandardGeometryBuilder(GeometryBuilder):
    """
    Builder that only generates local buffers and leaves placement, normals
    and UVs to the shared transform step.
    """

    @staticmethod
    def transform_and_apply(
        mesh: MeshTarget,
        vertices: npt.NDArray[np.float64],
        triangles: npt.NDArray[np.int32],
        settings: GeometryBuilderSettings
    ) -> None:
        transform.apply(mesh, vertices, triangles, settings)
