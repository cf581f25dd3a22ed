"""
Procedural primitive mesh generation.

Typical use::

    from geometryprovider import registry
    from geometryprovider.model.mesh import Mesh

    registry.initialize()
    variant = registry.get_registry().variant("Circle")
    settings = variant.create_settings()
    mesh = Mesh()
    registry.build(mesh, variant.builder, settings)
"""
from geometryprovider.logging_config import install_null_handler

install_null_handler()
