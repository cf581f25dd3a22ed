import math

import numpy as np
import pytest

from geometryprovider.config import MAX_SIDES
from geometryprovider.model.geometry_primitives import Vector, Quaternion
from geometryprovider.model.settings import GeometryBuilderSettings, CircleGeometryBuilderSettings


def test_defaults():
    s = GeometryBuilderSettings()
    assert s.position == Vector(0.0, 0.0, 0.0)
    assert s.rotation == Vector(0.0, 0.0, 0.0)
    assert s.scale == Vector(1.0, 1.0, 1.0)
    assert s.name == ""
    assert s.description == ""
    s.validate()


def test_tuples_are_coerced():
    s = GeometryBuilderSettings(position=(1, 2, 3), rotation=[0, 45, 0], scale=(2, 2, 2))
    assert s.position == Vector(1.0, 2.0, 3.0)
    assert s.rotation == Vector(0.0, 45.0, 0.0)
    assert s.scale == Vector(2.0, 2.0, 2.0)


def test_quaternion_rotation_is_kept():
    q = Quaternion.from_axis_angle(Vector(0.0, 1.0, 0.0), 0.3)
    s = GeometryBuilderSettings(rotation=q)
    assert s.rotation == q
    assert s.rotation is not q
    np.testing.assert_allclose(s.rotation_quaternion().to_matrix(), q.to_matrix())


def test_scale_none_is_rejected_at_construction():
    with pytest.raises(TypeError):
        GeometryBuilderSettings(scale=None)


def test_validate_rejects_none_assigned_later():
    s = GeometryBuilderSettings()
    s.scale = None
    with pytest.raises(TypeError):
        s.validate()


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_validate_rejects_non_finite_scale(bad):
    s = GeometryBuilderSettings(scale=(1.0, bad, 1.0))
    with pytest.raises(ValueError):
        s.validate()


def test_zero_scale_is_legal():
    GeometryBuilderSettings(scale=(0.0, 0.0, 0.0)).validate()


def test_circle_settings_are_base_settings():
    assert isinstance(CircleGeometryBuilderSettings(), GeometryBuilderSettings)


@pytest.mark.parametrize("requested, effective", [(-10, 3), (0, 3), (2, 3), (3, 3), (4, 4), (64, 64)])
def test_num_sides_clamped_up(requested, effective):
    assert CircleGeometryBuilderSettings(num_sides=requested).effective_num_sides() == effective


def test_num_sides_accepts_numpy_integers():
    assert CircleGeometryBuilderSettings(num_sides=np.int64(5)).effective_num_sides() == 5


@pytest.mark.parametrize("bad", ["8", 4.0, None, True])
def test_num_sides_must_be_integer(bad):
    with pytest.raises(TypeError):
        CircleGeometryBuilderSettings(num_sides=bad).effective_num_sides()


def test_num_sides_upper_bound():
    assert CircleGeometryBuilderSettings(num_sides=MAX_SIDES).effective_num_sides() == MAX_SIDES
    with pytest.raises(ValueError):
        CircleGeometryBuilderSettings(num_sides=MAX_SIDES + 1).effective_num_sides()


def test_settings_do_not_share_vectors():
    shared = Vector(1.0, 2.0, 3.0)
    a = GeometryBuilderSettings(position=shared, scale=shared)
    b = GeometryBuilderSettings(position=shared)

    a.position.x = 9.0
    assert b.position.x == 1.0
    assert a.scale.x == 1.0
    assert shared.x == 1.0
