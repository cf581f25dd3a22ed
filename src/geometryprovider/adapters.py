"""
Presentation Adapters
=====================
Describe the editable controls of a settings object for an editor surface.

The editor itself lives outside this package. An adapter only lists the
fields it would show (`fields`), writes edited values back into the settings
(`set_value`) and relays create/update events to whoever listens, so the
editor can rebuild the mesh after every change.

Adapters dedicated to one builder declare it in AFFINITY. The adapter table
reaches the registry only through `registry.initialize(adapters=...)`, which
defaults to DEFAULT_ADAPTERS; nothing is registered at import time.
"""
from __future__ import annotations

from dataclasses import dataclass
import numbers
from typing import Any, Callable, Optional

from geometryprovider.config import MIN_SIDES, MAX_SIDES
from geometryprovider.geometry.builders.circle import CircleGeometryBuilder
from geometryprovider.model.geometry_primitives import Vector
from geometryprovider.model.settings import GeometryBuilderSettings, CircleGeometryBuilderSettings


@dataclass(frozen=True)
class FieldSpec:
    """One editable control."""
    key: str  # dotted attribute path, e.g. "position.x"
    label: str
    value: float
    min_value: float = -1e9
    max_value: float = 1e9
    step: float = 0.1
    decimals: int = 3
    suffix: str = ""


class SettingsAdapter:
    """Base class for settings presentation adapters."""
    AFFINITY: Optional[type] = None  # builder type; None for the generic adapter
    TITLE: str = "Parameters"

    def __init__(self) -> None:
        self._on_create: list[Callable[[], None]] = []
        self._on_update: list[Callable[[], None]] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    # ---- events ----

    def add_create_callback(self, cb: Callable[[], None]) -> None:
        self._on_create.append(cb)

    def add_update_callback(self, cb: Callable[[], None]) -> None:
        self._on_update.append(cb)

    def create(self) -> None:
        """Relay a "create primitive" request."""
        for cb in self._on_create:
            cb()

    def _emit_update(self) -> None:
        for cb in self._on_update:
            cb()

    # ---- fields ----

    def fields(self, settings: GeometryBuilderSettings) -> list[FieldSpec]:
        """Controls for the placement fields shared by every builder."""
        specs = []
        specs += self._vector_fields(settings.position, "position", "Position", suffix="m")
        if isinstance(settings.rotation, Vector):
            specs += self._vector_fields(settings.rotation, "rotation", "Rotation", min_value=-360.0,
                                         max_value=360.0, step=1.0, suffix="°")
        specs += self._vector_fields(settings.scale, "scale", "Scale", step=0.05)
        return specs

    def set_value(self, settings: GeometryBuilderSettings, key: str, value: Any) -> None:
        """
        Writes an edited value into `settings` and notifies update listeners.

        Raises:
            KeyError: `key` is not one of this adapter's fields.
        """
        known = {spec.key for spec in self.fields(settings)}
        if key not in known:
            raise KeyError(f"{self.__class__.__name__} has no field '{key}'")

        target: Any = settings
        *path, attr = key.split(".")
        for part in path:
            target = getattr(target, part)
        setattr(target, attr, self._convert(key, value))

        self._emit_update()

    def _convert(self, key: str, value: Any) -> Any:
        return float(value)

    @staticmethod
    def _vector_fields(vector: Vector, key: str, label: str, **kwargs: Any) -> list[FieldSpec]:
        return [
            FieldSpec(key=f"{key}.{axis}", label=f"{label} {axis.upper()}:", value=getattr(vector, axis), **kwargs)
            for axis in ("x", "y", "z")
        ]


class StandardSettingsAdapter(SettingsAdapter):
    """Generic adapter used when a builder has no dedicated one."""
    AFFINITY = None


class CircleSettingsAdapter(SettingsAdapter):
    AFFINITY = CircleGeometryBuilder
    TITLE = "Circle"

    def fields(self, settings: GeometryBuilderSettings) -> list[FieldSpec]:
        specs = super().fields(settings)
        if isinstance(settings, CircleGeometryBuilderSettings):
            specs.append(FieldSpec(key="num_sides", label="Sides:", value=settings.num_sides,
                                   min_value=MIN_SIDES, max_value=MAX_SIDES, step=1, decimals=0))
        return specs

    def _convert(self, key: str, value: Any) -> Any:
        if key == "num_sides":
            return self._to_side_count(value)
        return super()._convert(key, value)

    @staticmethod
    def _to_side_count(value: Any) -> int:
        """
        Spin boxes report floats; only whole numbers are accepted.

        Raises:
            TypeError: `value` is a bool or not a number.
            ValueError: `value` has a fractional part or is not finite.
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"num_sides must be a whole number, got {value!r}.")
        if isinstance(value, numbers.Integral):
            return int(value)
        if not float(value).is_integer():
            raise ValueError(f"num_sides must be a whole number, got {value!r}.")
        return int(value)


# Adapters the registry scans by default
DEFAULT_ADAPTERS: tuple[type[SettingsAdapter], ...] = (
    CircleSettingsAdapter,
)
