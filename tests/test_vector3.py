"""Tests for Vector3 and Vector4."""

import numpy as np
import pytest

from math3d import InvalidArgumentError, Vector, Vector3, Vector4


class TestVector3:
    """Test Vector3 functionality."""

    def test_defaults(self):
        """Test that omitted components are zero."""
        assert Vector3().to_tuple() == (0.0, 0.0, 0.0)
        assert Vector3(1).to_tuple() == (1.0, 0.0, 0.0)

    def test_components(self):
        """Test component accessors."""
        v = Vector3(1, 2, 3)

        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
        assert isinstance(v.vector, Vector)
        assert v.vector.dimension == 3

    @pytest.mark.parametrize("bad", ["1", None, True, [1]])
    def test_rejects_non_numbers(self, bad):
        """Test that every component must be a number."""
        with pytest.raises(InvalidArgumentError, match="must be a number"):
            Vector3(0, bad, 0)

    def test_constants(self):
        """Test the named direction constants."""
        assert Vector3.up.to_tuple() == (0.0, 1.0, 0.0)
        assert Vector3.down.to_tuple() == (0.0, -1.0, 0.0)
        assert Vector3.right.to_tuple() == (1.0, 0.0, 0.0)
        assert Vector3.left.to_tuple() == (-1.0, 0.0, 0.0)
        assert Vector3.forward.to_tuple() == (0.0, 0.0, 1.0)
        assert Vector3.back.to_tuple() == (0.0, 0.0, -1.0)
        assert Vector3.one.to_tuple() == (1.0, 1.0, 1.0)
        assert Vector3.zero.to_tuple() == (0.0, 0.0, 0.0)

    def test_arithmetic_returns_vector3(self):
        """Test that inherited arithmetic keeps the concrete type."""
        v = Vector3(1, 2, 3) + Vector3.one

        assert isinstance(v, Vector3)
        assert v.to_tuple() == (2.0, 3.0, 4.0)
        assert isinstance(v.normalize(), Vector3)
        assert isinstance(-v, Vector3)
        assert isinstance(2 * v, Vector3)

    def test_negation(self):
        """Test that up negated is down."""
        assert -Vector3.up == Vector3.down

    def test_magnitude_and_normalize(self):
        """Test magnitude and normalization."""
        v = Vector3(3, 4, 0)

        assert v.magnitude == 5.0
        assert v.normalize().equals(Vector3(0.6, 0.8, 0))

    def test_normalize_zero(self):
        """Test that the zero vector normalizes to itself."""
        assert Vector3.zero.normalize().equals(Vector3.zero)

    def test_add_then_sub_is_identity(self):
        """Test that a + b - b equals a over random vectors."""
        rng = np.random.default_rng(42)
        for a_xyz, b_xyz in rng.uniform(-100, 100, size=(100, 2, 3)):
            a = Vector3(*map(float, a_xyz))
            b = Vector3(*map(float, b_xyz))

            assert (a + b - b).equals(a), (a, b)

    def test_normalize_is_idempotent(self):
        """Test that normalize applied twice equals normalize applied once."""
        rng = np.random.default_rng(42)
        for xyz in rng.uniform(-100, 100, size=(100, 3)):
            unit = Vector3(*map(float, xyz)).normalize()

            assert unit.normalize().equals(unit), unit

    def test_cross(self):
        """Test cross product of the basis vectors (left-handed, z forward)."""
        assert Vector3.right.cross(Vector3.up).equals(Vector3.forward)
        assert Vector3.up.cross(Vector3.forward).equals(Vector3.right)
        assert Vector3.up.cross(Vector3.right).equals(Vector3.back)

    def test_scale(self):
        """Test component-wise product."""
        assert Vector3(1, 2, 3).scale(Vector3(4, 5, 6)).to_tuple() == (4.0, 10.0, 18.0)

    def test_average(self):
        """Test midpoint."""
        assert Vector3(0, 2, 4).average(Vector3(2, 4, 6)).to_tuple() == (1.0, 3.0, 5.0)

    def test_dot_and_distance(self):
        """Test dot product and distance."""
        assert Vector3.right.dot(Vector3.up) == 0.0
        assert Vector3.zero.distance_to(Vector3(2, 3, 6)) == 7.0

    def test_homogeneous_and_direction(self):
        """Test conversions to Vector4."""
        v = Vector3(1, 2, 3)

        assert v.homogeneous.to_tuple() == (1.0, 2.0, 3.0, 1.0)
        assert v.vector4.to_tuple() == (1.0, 2.0, 3.0, 0.0)

    def test_from_vector4(self):
        """Test that w is dropped."""
        assert Vector3.from_vector4(Vector4(1, 2, 3, 4)).to_tuple() == (1.0, 2.0, 3.0)

    def test_from_vector4_rejects_other_types(self):
        """Test that from_vector4 requires a Vector4."""
        with pytest.raises(InvalidArgumentError, match="Vector4"):
            Vector3.from_vector4(Vector3.one)

    def test_mixed_types_rejected(self):
        """Test that Vector3 and Vector4 cannot be combined."""
        with pytest.raises(InvalidArgumentError, match="two Vector3"):
            Vector3.one.add(Vector4.one)
        with pytest.raises(InvalidArgumentError):
            Vector3.one.cross(Vector(3, [1, 0, 0]))
        with pytest.raises(TypeError):
            Vector3.one + Vector4.one

    def test_not_equal_to_other_types(self):
        """Test that == against another type is False."""
        assert Vector3.zero != Vector4.zero
        assert Vector3.zero != (0.0, 0.0, 0.0)

    def test_formatting(self):
        """Test repr, str and iteration."""
        v = Vector3(1, 2, 3)

        assert repr(v) == "Vector3(x=1.0, y=2.0, z=3.0)"
        assert str(v) == "(1.0,2.0,3.0)"
        assert list(v) == [1.0, 2.0, 3.0]
        assert len(v) == 3

    def test_unhashable(self):
        """Test that Vector3 cannot be used as a dict key."""
        with pytest.raises(TypeError):
            {Vector3.one: 1}


class TestVector4:
    """Test Vector4 functionality."""

    def test_w_defaults_to_zero(self):
        """Test the default w component."""
        assert Vector4(1, 2, 3).w == 0.0

    def test_components(self):
        """Test component accessors."""
        v = Vector4(1, 2, 3, 4)

        assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)

    def test_constants(self):
        """Test zero and one."""
        assert Vector4.zero.to_tuple() == (0.0, 0.0, 0.0, 0.0)
        assert Vector4.one.to_tuple() == (1.0, 1.0, 1.0, 1.0)

    def test_arithmetic(self):
        """Test that arithmetic keeps the Vector4 type."""
        v = Vector4(1, 2, 3, 4).sub(Vector4.one)

        assert isinstance(v, Vector4)
        assert v.to_tuple() == (0.0, 1.0, 2.0, 3.0)
        assert Vector4.one.dot(Vector4(1, 2, 3, 4)) == 10.0

    def test_repr(self):
        """Test repr."""
        assert repr(Vector4.one) == "Vector4(x=1.0, y=1.0, z=1.0, w=1.0)"
