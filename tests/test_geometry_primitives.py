import math

import numpy as np
import pytest

from geometryprovider.model.geometry_primitives import Vector, Quaternion


def test_vector_coerce_accepts_sequences():
    assert Vector.coerce((1, 2, 3)) == Vector(1.0, 2.0, 3.0)
    v = Vector(1.0, 0.0, 0.0)
    copy = Vector.coerce(v)
    assert copy == v
    assert copy is not v


@pytest.mark.parametrize("bad", [None, "abc"])
def test_vector_coerce_rejects_non_sequences(bad):
    with pytest.raises(TypeError):
        Vector.coerce(bad)


def test_vector_coerce_rejects_wrong_length():
    with pytest.raises(ValueError):
        Vector.coerce((1.0, 2.0))


def test_vector_scaling_and_length():
    assert Vector(1.0, 2.0, 3.0) * 2.0 == Vector(2.0, 4.0, 6.0)
    assert Vector(3.0, 4.0, 0.0).magnitude == pytest.approx(5.0)
    assert Vector(0.0, 0.0, 2.0).normalize() == Vector(0.0, 0.0, 1.0)
    assert Vector().normalize() == Vector(0.0, 0.0, 0.0)


def test_vector_is_finite():
    assert Vector(1.0, 2.0, 3.0).is_finite()
    assert not Vector(math.nan, 0.0, 0.0).is_finite()
    assert not Vector(0.0, math.inf, 0.0).is_finite()


def test_identity_quaternion_matrix_is_exact():
    np.testing.assert_array_equal(Quaternion.from_euler(Vector()).to_matrix(), np.eye(3))


def test_rotation_about_y_maps_x_to_negative_z():
    q = Quaternion.from_euler(Vector(0.0, 90.0, 0.0))
    rotated = q.rotate(Vector(1.0, 0.0, 0.0))
    assert rotated.x == pytest.approx(0.0, abs=1e-12)
    assert rotated.y == pytest.approx(0.0, abs=1e-12)
    assert rotated.z == pytest.approx(-1.0)


def test_euler_order_is_z_then_x_then_y():
    q = Quaternion.from_euler(Vector(90.0, 90.0, 90.0))
    qx = Quaternion.from_axis_angle(Vector(1.0, 0.0, 0.0), math.pi / 2)
    qy = Quaternion.from_axis_angle(Vector(0.0, 1.0, 0.0), math.pi / 2)
    qz = Quaternion.from_axis_angle(Vector(0.0, 0.0, 1.0), math.pi / 2)

    p = Vector(1.0, 2.0, 3.0)
    expected = qy.rotate(qx.rotate(qz.rotate(p)))
    actual = q.rotate(p)
    np.testing.assert_allclose(actual.to_array(), expected.to_array(), atol=1e-12)


def test_quaternion_normalize_rejects_zero():
    with pytest.raises(ValueError):
        Quaternion(0.0, 0.0, 0.0, 0.0).normalize()


def test_axis_angle_rejects_zero_axis():
    with pytest.raises(ValueError):
        Quaternion.from_axis_angle(Vector(), 1.0)
