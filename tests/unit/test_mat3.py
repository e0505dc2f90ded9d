"""
Tests for Mat3

Checked invariants:
1. Determinant by first-row cofactor expansion
2. M * M.inverse() ≈ IDENTITY, M.inverse().inverse() ≈ M
3. Singular M raises SingularMatrixError
4. det(A * B) ≈ det(A) * det(B)
"""

import math

import pytest

from lars import Mat3, SingularMatrixError, Vec3

M = Mat3(1.0, 2.0, 3.0, 3.0, 2.0, 1.0, 2.0, 1.0, 3.0)

INVERTIBLE = [
    M,
    Mat3(2.0, 0.0, 0.0, 0.0, 3.0, 0.0, 0.0, 0.0, 4.0),
    Mat3(0.0, -1.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0),
    Mat3(1.5, 0.2, -0.7, 0.4, 2.0, 0.1, -0.3, 0.8, 1.1),
]


class TestConstruction:
    def test_constants(self) -> None:
        assert Mat3.IDENTITY == Mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
        assert Mat3.ZERO == Mat3(*([0.0] * 9))

    def test_from_rows_and_cols(self) -> None:
        rows = Mat3.from_rows(Vec3(1.0, 2.0, 3.0), Vec3(3.0, 2.0, 1.0), Vec3(2.0, 1.0, 3.0))
        cols = Mat3.from_cols(Vec3(1.0, 3.0, 2.0), Vec3(2.0, 2.0, 1.0), Vec3(3.0, 1.0, 3.0))
        assert rows == M
        assert cols == M

    def test_entry_access(self) -> None:
        assert M[0, 2] == 3.0
        assert M[2, 0] == 2.0
        assert M[1, 1] == 2.0
        with pytest.raises(IndexError):
            M[3, 0]

    def test_rows_cols(self) -> None:
        assert M.row(2) == Vec3(2.0, 1.0, 3.0)
        assert M.col(0) == Vec3(1.0, 3.0, 2.0)
        with pytest.raises(IndexError):
            M.row(3)
        with pytest.raises(IndexError):
            M.col(-1)

    def test_str(self) -> None:
        assert str(Mat3.IDENTITY) == "[1.0, 0.0, 0.0]\n[0.0, 1.0, 0.0]\n[0.0, 0.0, 1.0]"


class TestArithmetic:
    def test_add(self) -> None:
        m = Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
        assert m + m == Mat3(2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0, 18.0)

    def test_sub(self) -> None:
        m = Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
        assert m - m == Mat3.ZERO

    def test_scalar_mul(self) -> None:
        assert 2.0 * Mat3.IDENTITY == Mat3(2.0, 0.0, 0.0, 0.0, 2.0, 0.0, 0.0, 0.0, 2.0)
        assert M * 1.0 == M

    def test_neg(self) -> None:
        assert M + (-M) == Mat3.ZERO

    def test_mat_vec(self) -> None:
        assert M * Vec3(1.0, 1.0, 1.0) == Vec3(6.0, 6.0, 6.0)
        assert M @ Vec3.UNIT_X == Vec3(1.0, 3.0, 2.0)
        assert Mat3.IDENTITY.mul_vec(Vec3(4.0, 5.0, 6.0)) == Vec3(4.0, 5.0, 6.0)

    def test_mat_mat(self) -> None:
        m = Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
        assert Mat3.IDENTITY * m == m
        assert m * Mat3.IDENTITY == m
        assert m @ m == Mat3(30.0, 36.0, 42.0, 66.0, 81.0, 96.0, 102.0, 126.0, 150.0)

    def test_transpose_and_trace(self) -> None:
        assert M.transpose() == Mat3(1.0, 3.0, 2.0, 2.0, 2.0, 1.0, 3.0, 1.0, 3.0)
        assert M.transpose().transpose() == M
        assert M.trace() == 6.0


class TestDeterminant:
    def test_determinant(self) -> None:
        assert M.determinant() == -12.0
        assert Mat3.IDENTITY.determinant() == 1.0

    def test_rank_deficient_is_zero(self) -> None:
        assert Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0).determinant() == 0.0

    @pytest.mark.parametrize("a", INVERTIBLE)
    @pytest.mark.parametrize("b", INVERTIBLE)
    def test_multiplicative(self, a: Mat3, b: Mat3) -> None:
        assert (a * b).determinant() == pytest.approx(
            a.determinant() * b.determinant(), abs=1e-9
        )


class TestInverse:
    def test_known_inverse(self) -> None:
        expected = Mat3(-5.0, 3.0, 4.0, 7.0, 3.0, -8.0, 1.0, -3.0, 4.0).scale(1.0 / 12.0)
        assert M.inverse().approx_eq(expected)

    def test_identity_inverse(self) -> None:
        assert Mat3.IDENTITY.inverse() == Mat3.IDENTITY

    def test_singular_raises(self) -> None:
        with pytest.raises(SingularMatrixError):
            Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0).inverse()

    def test_zero_matrix_raises(self) -> None:
        with pytest.raises(SingularMatrixError) as exc_info:
            Mat3.ZERO.inverse()
        assert exc_info.value.determinant == 0.0

    def test_is_singular(self) -> None:
        assert Mat3.ZERO.is_singular()
        assert not M.is_singular()

    def test_near_singular_raises(self) -> None:
        m = Mat3(1e-5, 0.0, 0.0, 0.0, 1e-5, 0.0, 0.0, 0.0, 1e-5)
        assert m.determinant() != 0.0
        assert m.is_singular()
        with pytest.raises(SingularMatrixError):
            m.inverse()

    def test_custom_eps(self) -> None:
        """det = 0.125; the boundary itself counts as singular"""
        m = Mat3(0.5, 0.0, 0.0, 0.0, 0.5, 0.0, 0.0, 0.0, 0.5)
        assert m.is_singular(eps=0.125)
        assert not m.is_singular(eps=0.1)
        with pytest.raises(SingularMatrixError):
            m.inverse(eps=0.125)
        assert m.inverse(eps=0.1) == Mat3(2.0, 0.0, 0.0, 0.0, 2.0, 0.0, 0.0, 0.0, 2.0)

    def test_inverse_large_entries(self) -> None:
        """The cofactor expansion overflows to inf; the inverse is still computed"""
        m = Mat3(1e120, 0.0, 0.0, 0.0, 1e120, 0.0, 0.0, 0.0, 1e120)
        assert m.determinant() == math.inf
        assert not m.is_singular()
        inv = m.inverse()
        assert inv.a == pytest.approx(1e-120, rel=1e-12)
        assert inv.i == pytest.approx(1e-120, rel=1e-12)
        assert (m * inv).approx_eq(Mat3.IDENTITY)

    def test_inverse_large_general(self) -> None:
        m = M.scale(1e120)
        assert not math.isfinite(m.determinant())
        assert m.inverse().scale(1e120).approx_eq(M.inverse())
        assert (m * m.inverse()).approx_eq(Mat3.IDENTITY)

    def test_non_finite_entry_raises(self) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            Mat3(math.nan, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0).inverse()

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_product_with_inverse_is_identity(self, m: Mat3) -> None:
        assert (m * m.inverse()).approx_eq(Mat3.IDENTITY)

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_double_inverse(self, m: Mat3) -> None:
        assert m.inverse().inverse().approx_eq(m)
