from pyso3 import (
    AngleAxis,
    ComparisonTraits,
    ConversionTraits,
    EulerAnglesZyx,
    FixingTraits,
    MultiplicationTraits,
    Quaternion,
    RotationMatrix,
    RotationQuaternion,
    RotationVector,
)
import numpy as np
import pytest

tol = 1e-10  # tolerance

A = RotationMatrix(RotationVector(0.1, 0.2, 0.3))
B = RotationMatrix(RotationVector(-0.5, 0.4, 0.1))
C = RotationMatrix(RotationVector(1.0, 0.0, -1.2))


def test_scoping_classes():
    for cls in [ConversionTraits, MultiplicationTraits, ComparisonTraits, FixingTraits]:
        with pytest.raises(RuntimeError):
            cls()


def test_matrix_composition():
    assert np.linalg.norm(((A * B) * C).matrix - (A * (B * C)).matrix) < tol
    assert A * B != B * A
    assert np.linalg.norm((A * B).matrix - A.matrix @ B.matrix) < tol


def test_quaternion_composition():
    a = RotationQuaternion(A)
    b = RotationQuaternion(B)
    c = RotationQuaternion(C)
    assert np.linalg.norm(((a * b) * c).get_unique().vector
                          - (a * (b * c)).get_unique().vector) < tol
    assert a * b != b * a
    # agrees with the matrix product
    assert np.linalg.norm(RotationMatrix(a * b).matrix - (A * B).matrix) < tol


def test_composition_through_quaternions():
    aa = AngleAxis(0.1, [0, 0, 1]) * AngleAxis(0.2, [0, 0, 1])
    assert type(aa) is AngleAxis
    assert abs(aa.angle - 0.3) < tol
    assert np.linalg.norm(aa.axis - [0, 0, 1]) < tol
    rv = RotationVector(A) * RotationVector(B)
    assert type(rv) is RotationVector
    assert np.linalg.norm(RotationMatrix(rv).matrix - (A * B).matrix) < tol
    e = EulerAnglesZyx(A) * EulerAnglesZyx(B)
    assert type(e) is EulerAnglesZyx
    assert np.linalg.norm(RotationMatrix(e).matrix - (A * B).matrix) < tol


def test_composition_errors():
    with pytest.raises(TypeError):
        A * RotationQuaternion(B)
    with pytest.raises(TypeError):
        A * B.astype(np.float32)
    with pytest.raises(TypeError):
        MultiplicationTraits.mult(Quaternion(), A)


def test_comparison():
    assert A == RotationMatrix(A)
    assert A != B
    # different representations do not compare equal
    assert A != RotationQuaternion(A)
    assert ComparisonTraits.find(A, RotationQuaternion()) is None
    with pytest.raises(TypeError):
        ComparisonTraits.is_equal(A, RotationQuaternion())
    assert AngleAxis(0.5, [0, 0, 1]) == AngleAxis(-0.5, [0, 0, -1])
    assert RotationQuaternion(0.5, 0.5, 0.5, 0.5) == RotationQuaternion(-0.5, -0.5, -0.5, -0.5)


def test_fix_rotation_matrix():
    R = RotationMatrix(A)
    R.set_matrix(1.01 * A.matrix)
    assert abs(R.determinant() - 1.01 ** 3) < tol
    assert FixingTraits.fix(R) is R
    assert abs(R.determinant() - 1) < 1e-12
    assert np.linalg.norm(R.matrix - A.matrix) < 1e-12
    # only the determinant is restored
    R.set_matrix(np.diag([1.1, 1.0, 1.0]))
    R.fix()
    assert abs(R.determinant() - 1) < 1e-12
    assert not np.allclose(R.matrix @ R.matrix.T, np.eye(3), atol=1e-4)
    R.set_matrix(-np.eye(3))
    with pytest.raises(ValueError):
        R.fix()


def test_fix_others():
    q = RotationQuaternion(A)
    q._data = 1.1 * q._data
    q.fix()
    assert abs(q.norm() - 1) < 1e-12
    aa = AngleAxis(0.5, [0, 0, 1])
    aa._data[1:] = [0, 0, 1.001]
    aa.fix()
    assert abs(np.linalg.norm(aa.axis) - 1) < 1e-12
    rv = RotationVector(1, 2, 3)
    assert rv.fix() == RotationVector(1, 2, 3)
    e = EulerAnglesZyx(1, 2, 3)
    assert np.all(e.fix().vector == [1, 2, 3])


def test_long_chain():
    R = RotationMatrix()
    q = RotationQuaternion()
    step = RotationQuaternion(RotationVector(0.01, 0.02, -0.03))
    step_R = RotationMatrix(step)
    for i in range(1000):
        q = q * step
        R = R * step_R
    q.fix()
    R.fix()
    assert np.linalg.norm(RotationMatrix(q).matrix - R.matrix) < 1e-8
