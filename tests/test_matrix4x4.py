"""Tests for Matrix4x4."""

import numpy as np
import pytest

from math3d import InvalidArgumentError, Matrix, Matrix4x4, Quaternion, Vector3, Vector4


def assert_vec3_close(actual, expected, abs_tol=1e-9):
    assert actual.to_tuple() == pytest.approx(expected.to_tuple(), abs=abs_tol)


@pytest.fixture
def counting_matrix():
    """Singular matrix holding 0..15 row-major."""
    return Matrix4x4(range(16))


@pytest.fixture
def affine_matrix():
    """Invertible matrix with an exactly representable inverse."""
    return Matrix4x4([2, 0, 0, 1, 0, 4, 0, 2, 0, 0, 8, 3, 0, 0, 0, 1])


class TestMatrix4x4Construction:
    """Test construction and element access."""

    def test_default_is_zero(self):
        """Test that no values give the zero matrix."""
        assert Matrix4x4().equals(Matrix4x4.zero)
        assert not Matrix4x4.zero.values.any()

    def test_identity(self):
        """Test the identity constant."""
        assert Matrix4x4.identity.to_numpy().tolist() == np.eye(4).tolist()

    def test_named_elements(self, counting_matrix):
        """Test m_ij accessors (row i, column j)."""
        assert counting_matrix.m11 == 0.0
        assert counting_matrix.m23 == 6.0
        assert counting_matrix.m41 == 12.0
        assert counting_matrix.m44 == 15.0

    def test_rows_and_columns(self, counting_matrix):
        """Test row and column views."""
        assert counting_matrix.rows[3] == (12.0, 13.0, 14.0, 15.0)
        assert counting_matrix.columns[3] == (3.0, 7.0, 11.0, 15.0)
        assert counting_matrix.size == (4, 4)

    def test_from_matrix(self):
        """Test wrapping a generic 4x4 matrix."""
        m = Matrix4x4.from_matrix(Matrix(4, 4, range(16)))

        assert isinstance(m, Matrix4x4)
        assert m.m12 == 1.0
        assert m.matrix.size == (4, 4)

    def test_from_matrix_rejects_other_sizes(self):
        """Test that only 4x4 matrices can be wrapped."""
        with pytest.raises(InvalidArgumentError, match="4x4"):
            Matrix4x4.from_matrix(Matrix(3, 3))
        with pytest.raises(InvalidArgumentError):
            Matrix4x4.from_matrix(np.eye(4))


class TestMatrix4x4Algebra:
    """Test determinant, inverse and products."""

    def test_determinant_singular(self, counting_matrix):
        """Test that a rank-deficient matrix has zero determinant."""
        assert counting_matrix.determinant() == 0.0

    def test_determinant(self, affine_matrix):
        """Test determinant of a triangular matrix."""
        assert affine_matrix.determinant() == 64.0

    def test_determinant_matches_numpy(self):
        """Test the analytic determinant against numpy.linalg."""
        rng = np.random.default_rng(42)
        values = rng.normal(size=(4, 4))

        assert Matrix4x4(values).determinant() == pytest.approx(np.linalg.det(values))

    def test_determinant_and_inverse_agree(self):
        """Test det(M) * det(M^-1) = 1 and M @ M^-1 = I over random matrices."""
        rng = np.random.default_rng(42)
        for values in rng.uniform(-5, 5, size=(25, 4, 4)):
            m = Matrix4x4(values)
            inverse = m.inverse()

            assert m.determinant() * inverse.determinant() == pytest.approx(1.0)
            np.testing.assert_allclose(m.mul(inverse).to_numpy(), np.eye(4), atol=1e-8)

    def test_singular_has_no_inverse(self, counting_matrix):
        """Test that inverse returns None for a singular matrix."""
        assert counting_matrix.inverse() is None

    def test_inverse(self, affine_matrix):
        """Test that M @ M^-1 is the identity."""
        inverse = affine_matrix.inverse()

        assert inverse is not None
        assert affine_matrix.mul(inverse).equals(Matrix4x4.identity)
        assert inverse.mul(affine_matrix).equals(Matrix4x4.identity)

    def test_inverse_matches_numpy(self):
        """Test the analytic inverse against numpy.linalg."""
        rng = np.random.default_rng(7)
        values = rng.normal(size=(4, 4))

        np.testing.assert_allclose(
            Matrix4x4(values).inverse().to_numpy(), np.linalg.inv(values), atol=1e-10
        )

    def test_transpose_sum(self, counting_matrix):
        """Test that M + M^T has entries 5 * (i + j)."""
        expected = Matrix4x4([5 * (i + j) for i in range(4) for j in range(4)])

        assert (counting_matrix + counting_matrix.transpose()).equals(expected)

    def test_arithmetic_types(self, counting_matrix):
        """Test that arithmetic results stay Matrix4x4."""
        assert isinstance(counting_matrix.negate(), Matrix4x4)
        assert isinstance(counting_matrix - counting_matrix, Matrix4x4)
        assert isinstance(2 * counting_matrix, Matrix4x4)
        assert (counting_matrix * 2).m44 == 30.0
        assert (-counting_matrix).m44 == -15.0

    def test_matmul_operator(self, affine_matrix):
        """Test @ with matrices and vectors."""
        assert (affine_matrix @ Matrix4x4.identity).equals(affine_matrix)
        assert (affine_matrix @ Vector4(1, 1, 1, 0)).to_tuple() == (2.0, 4.0, 8.0, 0.0)
        assert (affine_matrix @ Vector3(1, 1, 1)).to_tuple() == (3.0, 6.0, 11.0)

    def test_mul_vector_treats_vector3_as_point(self, affine_matrix):
        """Test that mul_vector3 applies the translation."""
        assert affine_matrix.mul_vector3(Vector3.zero).to_tuple() == (1.0, 2.0, 3.0)

    def test_operand_validation(self, affine_matrix):
        """Test that operands must be Matrix4x4 / vectors."""
        with pytest.raises(InvalidArgumentError, match="two Matrix4x4"):
            affine_matrix.mul(Matrix(4, 4))
        with pytest.raises(InvalidArgumentError):
            affine_matrix.mul_vector(Vector3.one)
        with pytest.raises(InvalidArgumentError):
            affine_matrix.mul_vector3(Vector4.one)
        with pytest.raises(TypeError):
            affine_matrix @ 2

    def test_unhashable(self):
        """Test that matrices cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Matrix4x4.identity)


class TestMatrix4x4Factories:
    """Test scale / translation / rotation / TRS factories."""

    def test_scale_matrix(self):
        """Test per-axis scaling."""
        m = Matrix4x4.scale_matrix(Vector3(3, 4, 5))

        assert m.mul_vector3(Vector3.up).to_tuple() == (0.0, 4.0, 0.0)

    def test_uniform_scale(self):
        """Test that a number scales every axis."""
        assert Matrix4x4.scale_matrix(2).equals(Matrix4x4.scale_matrix(Vector3(2, 2, 2)))

    def test_scale_matrix_validation(self):
        """Test that scale must be a number or a Vector3."""
        with pytest.raises(InvalidArgumentError, match="number or a Vector3"):
            Matrix4x4.scale_matrix("2")

    def test_flip_matrix(self):
        """Test that flipping twice is the identity."""
        flip = Matrix4x4.flip_matrix(False, True, False)

        assert flip.mul_vector3(Vector3(1, 2, 3)).to_tuple() == (1.0, -2.0, 3.0)
        assert flip.mul(flip).equals(Matrix4x4.identity)

    def test_translation_matrix(self):
        """Test translation of a point."""
        m = Matrix4x4.translation_matrix(Vector3(1, 2, 3))

        assert m.mul_vector3(Vector3.one).to_tuple() == (2.0, 3.0, 4.0)
        assert m.mul_vector(Vector4(1, 1, 1, 0)).to_tuple() == (1.0, 1.0, 1.0, 0.0)

    @pytest.mark.parametrize("euler", [(0, 90, 0), (10, 20, 30), (-75, 140, 5)])
    def test_rotation_matrix_matches_quaternion(self, euler):
        """Test that the rotation matrix rotates like the quaternion."""
        q = Quaternion.euler(*euler)
        v = Vector3(1, -2, 3)

        assert_vec3_close(Matrix4x4.rotation_matrix(q).mul_vector3(v), q.mul_vector3(v))

    def test_rotation_matrix_is_orthonormal(self):
        """Test that R R^T = I and det R = 1."""
        r = Matrix4x4.rotation_matrix(Quaternion.euler(10, 20, 30))

        np.testing.assert_allclose(r.mul(r.transpose()).to_numpy(), np.eye(4), atol=1e-12)
        assert r.determinant() == pytest.approx(1.0)

    def test_trs_order(self):
        """Test that scale, then rotation, then translation is applied."""
        q = Quaternion.euler(0, 90, 0)
        m = Matrix4x4.trs(Vector3(0, 0, 10), q, Vector3(2, 2, 2))

        assert_vec3_close(m.mul_vector3(Vector3.forward), Vector3(2, 0, 10))

    def test_trs_determinant(self):
        """Test that det(TRS) is the product of the scale factors."""
        m = Matrix4x4.trs(Vector3(1, 2, 3), Quaternion.euler(10, 20, 30), Vector3(2, 3, 4))

        assert m.determinant() == pytest.approx(24.0)

    def test_local_to_world_defaults(self):
        """Test that rotation and scale default to identity and one."""
        m = Matrix4x4.local_to_world_matrix(Vector3(1, 2, 3))

        assert m.equals(Matrix4x4.translation_matrix(Vector3(1, 2, 3)))

    def test_local_to_world_yaw_and_scale(self):
        """Test a space one unit forward, turned 90 degrees about y, scaled by 2."""
        m = Matrix4x4.local_to_world_matrix(Vector3.forward, Quaternion.euler(0, 90, 0), 2)

        assert_vec3_close(m.mul_vector3(Vector3(0.5, 0, 0)), Vector3.zero)
        assert_vec3_close(m.mul_vector3(Vector3.zero), Vector3(0, 0, 1))
        assert_vec3_close(m.mul_vector3(Vector3.forward), Vector3(2, 0, 1))

    def test_world_to_local_yaw_and_scale(self):
        """Test the inverse of the yawed and scaled space."""
        m = Matrix4x4.world_to_local_matrix(Vector3.forward, Quaternion.euler(0, 90, 0), 2)

        assert_vec3_close(m.mul_vector3(Vector3.zero), Vector3(0.5, 0, 0))
        assert_vec3_close(m.mul_vector3(Vector3(0, 0, 1)), Vector3.zero)
        assert_vec3_close(m.mul_vector3(Vector3(2, 0, 1)), Vector3.forward)

    def test_world_to_local_is_inverse(self):
        """Test that world_to_local undoes local_to_world."""
        position = Vector3(1, 2, 3)
        rotation = Quaternion.euler(10, 20, 30)
        scale = Vector3(2, 3, 4)
        point = Vector3(-4, 5, 6)

        to_world = Matrix4x4.local_to_world_matrix(position, rotation, scale)
        to_local = Matrix4x4.world_to_local_matrix(position, rotation, scale)

        assert_vec3_close(to_local.mul_vector3(to_world.mul_vector3(point)), point)

    def test_world_to_local_zero_scale(self):
        """Test that a collapsed axis gives no inverse."""
        assert Matrix4x4.world_to_local_matrix(Vector3.one, None, Vector3(0, 1, 1)) is None

    def test_factory_validation(self):
        """Test argument types of the factories."""
        with pytest.raises(InvalidArgumentError):
            Matrix4x4.translation_matrix((1, 2, 3))
        with pytest.raises(InvalidArgumentError):
            Matrix4x4.rotation_matrix(Vector3.one)
