"""
Builder Registry
================
The table of available primitive builders, resolved once per process.

Why is this file needed?
------------------------
1. Discovery: The editor surface lists the variants (name, description) and
   needs, for each one, a builder, a settings factory and an adapter that
   knows how to present those settings.
2. Resolution: Fallback names, fallback descriptions and adapter lookup by
   affinity happen here, once, instead of on every selection.
3. Lifecycle: The host calls `initialize()` explicitly before first use. The
   resolved table is immutable afterwards and safe to read from any thread.

Classes:
    BuilderRegistration: Static description of one builder variant.
    BuilderVariant: A resolved variant handed to consumers.
    BuilderRegistry: The resolved, read-only table.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Iterable, Optional, Sequence, TYPE_CHECKING

from geometryprovider.adapters import SettingsAdapter, StandardSettingsAdapter, DEFAULT_ADAPTERS
from geometryprovider.config import DEFAULT_DESCRIPTION
from geometryprovider.geometry.builders import GeometryBuilder, CircleGeometryBuilder, QuadGeometryBuilder
from geometryprovider.model.settings import GeometryBuilderSettings, CircleGeometryBuilderSettings

if TYPE_CHECKING:
    from geometryprovider.model.mesh import MeshTarget

logger = logging.getLogger(__name__)

SettingsFactory = Callable[[], GeometryBuilderSettings]
AdapterFactory = Callable[[], SettingsAdapter]


@dataclass(frozen=True)
class BuilderRegistration:
    builder_type: type[GeometryBuilder]
    settings_factory: SettingsFactory
    name: Optional[str] = None
    description: Optional[str] = None
    # Overrides the affinity lookup when given
    adapter_factory: Optional[AdapterFactory] = None


@dataclass(frozen=True)
class BuilderVariant:
    builder: GeometryBuilder
    name: str
    description: str
    settings_factory: SettingsFactory
    adapter: SettingsAdapter

    def create_settings(self) -> GeometryBuilderSettings:
        """Fresh settings for this variant, stamped with its name and description."""
        settings = self.settings_factory()
        settings.name = self.name
        settings.description = self.description
        return settings


DEFAULT_REGISTRATIONS: tuple[BuilderRegistration, ...] = (
    BuilderRegistration(
        builder_type=CircleGeometryBuilder,
        settings_factory=CircleGeometryBuilderSettings,
        name="Circle",
        description="Builds a circle with the desired number of edges.",
    ),
    BuilderRegistration(
        builder_type=QuadGeometryBuilder,
        settings_factory=GeometryBuilderSettings,
        name="Quad",
        description="A simple quad.",
    ),
)


def _instantiate_adapter(factory: AdapterFactory) -> SettingsAdapter:
    try:
        return factory()
    except Exception as e:
        logger.warning(
            f"Could not instantiate custom settings adapter {factory!r}: {e}. "
            f"Falling back to {StandardSettingsAdapter.__name__}."
        )
        return StandardSettingsAdapter()


def resolve_adapter(
    builder_type: type[GeometryBuilder],
    adapters: Iterable[type[SettingsAdapter]]
) -> SettingsAdapter:
    """
    Finds the presentation adapter for `builder_type`.

    Exactly one adapter with a matching AFFINITY is instantiated. No match,
    several matches or a failing constructor all fall back to the standard
    adapter.
    """
    matches = [cls for cls in adapters if getattr(cls, "AFFINITY", None) is builder_type]

    if not matches:
        return StandardSettingsAdapter()

    if len(matches) > 1:
        names = ", ".join(cls.__name__ for cls in matches)
        logger.warning(f"Several adapters declare affinity to {builder_type.__name__} ({names}); using the standard one.")
        return StandardSettingsAdapter()

    return _instantiate_adapter(matches[0])


class BuilderRegistry:
    """Resolved, read-only table of builder variants."""

    def __init__(
        self,
        registrations: Sequence[BuilderRegistration] = DEFAULT_REGISTRATIONS,
        adapters: Optional[Iterable[type[SettingsAdapter]]] = None
    ) -> None:
        adapter_types = tuple(DEFAULT_ADAPTERS if adapters is None else adapters)
        for cls in adapter_types:
            if getattr(cls, "AFFINITY", None) is None:
                raise ValueError(f"{cls.__name__} must define AFFINITY")
        self._variants: tuple[BuilderVariant, ...] = tuple(
            self._resolve(reg, adapter_types) for reg in registrations
        )
        logger.info(f"Registered {len(self._variants)} builder variants: {', '.join(self.names())}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(variants={list(self.names())})"

    def __len__(self) -> int:
        return len(self._variants)

    @staticmethod
    def _resolve(
        reg: BuilderRegistration,
        adapter_types: tuple[type[SettingsAdapter], ...]
    ) -> BuilderVariant:
        name = reg.name if reg.name else reg.builder_type.__name__
        description = reg.description if reg.description else DEFAULT_DESCRIPTION

        if reg.adapter_factory is not None:
            adapter = _instantiate_adapter(reg.adapter_factory)
        else:
            adapter = resolve_adapter(reg.builder_type, adapter_types)

        return BuilderVariant(
            builder=reg.builder_type(),
            name=name,
            description=description,
            settings_factory=reg.settings_factory,
            adapter=adapter,
        )

    def list_variants(self) -> tuple[BuilderVariant, ...]:
        return self._variants

    def names(self) -> tuple[str, ...]:
        return tuple(v.name for v in self._variants)

    def variant(self, name: str) -> BuilderVariant:
        for v in self._variants:
            if v.name == name:
                return v
        raise KeyError(f"No builder variant registered under '{name}'")


# ------------------------------------------------------------------------------
# Process-wide registry
# ------------------------------------------------------------------------------
_registry: Optional[BuilderRegistry] = None


def initialize(
    registrations: Sequence[BuilderRegistration] = DEFAULT_REGISTRATIONS,
    adapters: Optional[Iterable[type[SettingsAdapter]]] = None
) -> BuilderRegistry:
    """
    Populates the process-wide registry. Call once, before first use.

    Raises:
        RuntimeError: The registry was already initialized.
    """
    global _registry
    if _registry is not None:
        raise RuntimeError("Builder registry is already initialized.")
    _registry = BuilderRegistry(registrations, adapters)
    return _registry


def is_initialized() -> bool:
    return _registry is not None


def get_registry() -> BuilderRegistry:
    if _registry is None:
        raise RuntimeError("Builder registry is not initialized; call initialize() first.")
    return _registry


def list_variants() -> tuple[BuilderVariant, ...]:
    return get_registry().list_variants()


def build(mesh: MeshTarget, builder: GeometryBuilder, settings: GeometryBuilderSettings) -> None:
    """Entry point the editor calls whenever parameters change."""
    logger.debug(f"Building {settings.name or type(builder).__name__} into {mesh!r}")
    builder.build(mesh, settings)
