import pytest

from geometryprovider import registry
from geometryprovider.model.mesh import Mesh


@pytest.fixture
def mesh():
    return Mesh()


@pytest.fixture
def fresh_registry(monkeypatch):
    """Process-wide registry reset to the uninitialized state for one test."""
    monkeypatch.setattr(registry, "_registry", None)
    yield registry
