from pyso3 import (
    AngleAxis,
    ConversionTraits,
    EulerAnglesXyz,
    EulerAnglesZyx,
    RotationMatrix,
    RotationQuaternion,
    RotationVector,
)
from scipy.spatial.transform import Rotation
import numpy as np
import pytest

tol = 1e-9  # tolerance

representations = [
    AngleAxis,
    RotationVector,
    RotationQuaternion,
    RotationMatrix,
    EulerAnglesXyz,
    EulerAnglesZyx,
]

rotation_vectors = [
    [0.1, 0.2, 0.3],
    [1.0, -2.0, 0.5],
    [np.pi / 2, 0, 0],
    [0, 3.0, 0],
    [-0.4, 0.1, -2.5],
    [0, 0, 0],
]


def from_reference(cls, r: Rotation):
    """Builds a value of a representation from a scipy rotation."""
    v = r.as_rotvec()
    if cls is AngleAxis:
        n = np.linalg.norm(v)
        return AngleAxis() if n == 0 else AngleAxis(n, v / n)
    if cls is RotationVector:
        return RotationVector(v)
    if cls is RotationQuaternion:
        x, y, z, w = r.as_quat()
        return RotationQuaternion(w, x, y, z)
    if cls is RotationMatrix:
        return RotationMatrix(r.as_matrix())
    if cls is EulerAnglesXyz:
        return EulerAnglesXyz(r.as_euler("XYZ"))
    if cls is EulerAnglesZyx:
        return EulerAnglesZyx(r.as_euler("zyx"))
    raise ValueError(cls)


def test_table_is_complete():
    assert len(ConversionTraits.pairs()) == 36
    for dest in representations:
        for source in representations:
            assert (dest.__name__, source.__name__) in ConversionTraits.pairs()


@pytest.mark.parametrize("dest", representations)
@pytest.mark.parametrize("source", representations)
@pytest.mark.parametrize("v", rotation_vectors)
def test_convert(source, dest, v):
    r = Rotation.from_rotvec(v)
    res = dest(from_reference(source, r))
    assert type(res) is dest
    assert np.linalg.norm(RotationMatrix(res).matrix - r.as_matrix()) < tol


@pytest.mark.parametrize("cls", representations)
def test_euler_conventions(cls):
    e = [0.3, -0.2, 0.9]
    R_xyz = RotationMatrix(EulerAnglesXyz(e)).matrix
    R_zyx = RotationMatrix(EulerAnglesZyx(e)).matrix
    assert np.linalg.norm(R_xyz - Rotation.from_euler("XYZ", e).as_matrix()) < tol
    assert np.linalg.norm(R_zyx - Rotation.from_euler("zyx", e).as_matrix()) < tol
    # through every representation
    assert np.linalg.norm(RotationMatrix(cls(EulerAnglesXyz(e))).matrix - R_xyz) < tol
    assert np.linalg.norm(RotationMatrix(cls(EulerAnglesZyx(e))).matrix - R_zyx) < tol


def test_rotation_vector_to_matrix():
    assert RotationMatrix(RotationVector()) == RotationMatrix()
    R = RotationMatrix(RotationVector(np.pi / 2, 0, 0))
    assert np.linalg.norm(R.matrix - [[1, 0, 0], [0, 0, -1], [0, 1, 0]]) < tol


def test_euler_xyz_to_matrix():
    roll, pitch, yaw = 0.3, -0.2, 0.9
    sr, cr = np.sin(roll), np.cos(roll)
    sp, cp = np.sin(pitch), np.cos(pitch)
    sy, cy = np.sin(yaw), np.cos(yaw)
    expected = [
        [cp * cy, -cp * sy, sp],
        [cr * sy + sr * cy * sp, cr * cy - sr * sy * sp, -sr * cp],
        [sr * sy - cr * cy * sp, sr * cy + cr * sy * sp, cr * cp],
    ]
    R = RotationMatrix(EulerAnglesXyz(roll, pitch, yaw))
    assert np.linalg.norm(R.matrix - expected) < tol
    # the same matrix as the angles stored in reverse order
    assert np.linalg.norm(R.matrix - RotationMatrix(EulerAnglesZyx(yaw, pitch, roll)).matrix) < tol
    res = EulerAnglesXyz(R)
    assert np.linalg.norm(res.vector - [roll, pitch, yaw]) < tol


def test_euler_zyx_to_matrix():
    assert RotationMatrix(EulerAnglesZyx()) == RotationMatrix()
    R = RotationMatrix(EulerAnglesZyx(np.pi / 2, 0, 0))
    assert np.linalg.norm(R.matrix - [[0, -1, 0], [1, 0, 0], [0, 0, 1]]) < tol


def test_antipodal_quaternions():
    q = RotationQuaternion(0.5, -0.5, 0.5, 0.5)
    p = RotationQuaternion(-0.5, 0.5, -0.5, -0.5)
    assert RotationMatrix(q) == RotationMatrix(p)
    assert q == p


def test_round_trip():
    R = RotationMatrix(Rotation.from_rotvec([1.0, -2.0, 0.5]).as_matrix())
    assert np.linalg.norm(RotationMatrix(RotationQuaternion(R)).matrix - R.matrix) < tol
    q = RotationQuaternion(R)
    assert np.linalg.norm(RotationQuaternion(AngleAxis(q)).get_unique().vector
                          - q.get_unique().vector) < tol


def test_near_half_turn():
    for axis in np.eye(3):
        R = RotationMatrix(Rotation.from_rotvec(np.pi * axis).as_matrix())
        q = RotationQuaternion(R)
        assert abs(q.norm() - 1) < tol
        assert np.linalg.norm(RotationMatrix(q).matrix - R.matrix) < tol
        aa = AngleAxis(R)
        assert abs(aa.angle - np.pi) < 1e-6


def test_identity_degenerate():
    aa = AngleAxis(RotationQuaternion())
    assert aa.angle == 0
    assert np.all(aa.axis == [1, 0, 0])
    assert AngleAxis(RotationVector()) == AngleAxis()
    assert np.all(RotationVector(RotationQuaternion()).vector == 0)


def test_gimbal_lock():
    zyx = EulerAnglesZyx(0.3, np.pi / 2, 0)
    res = EulerAnglesZyx(RotationMatrix(zyx))
    assert abs(res.yaw - 0.3) < 1e-6
    assert abs(res.pitch - np.pi / 2) < 1e-6
    assert res.roll == 0
    xyz = EulerAnglesXyz(0, np.pi / 2, 0.4)
    res = EulerAnglesXyz(RotationMatrix(xyz))
    assert abs(res.yaw - 0.4) < 1e-6
    assert res.roll == 0
    # a locked rotation with both outer angles set
    zyx = EulerAnglesZyx(0.3, -np.pi / 2, 0.2)
    res = EulerAnglesZyx(RotationQuaternion(zyx))
    assert np.linalg.norm(RotationMatrix(res).matrix - RotationMatrix(zyx).matrix) < 1e-6


def test_precision():
    rv = RotationVector(0.1, 0.2, 0.3)
    R32 = RotationMatrix(rv, dtype=np.float32)
    assert R32.dtype == np.float32
    assert np.linalg.norm(R32.matrix - RotationMatrix(rv).matrix) < 1e-6
    assert RotationQuaternion(R32).dtype == np.float32
    assert RotationQuaternion(R32, dtype=np.float64).dtype == np.float64
    with pytest.raises(TypeError):
        RotationMatrix(rv, dtype=np.int32)


def test_small_angle():
    # linearized below the single precision threshold
    R = RotationMatrix(RotationVector(1e-7, 0, 0), dtype=np.float32)
    assert R.matrix[2, 1] == np.float32(1e-7)
    assert R.matrix[1, 2] == -np.float32(1e-7)
    assert R.matrix[1, 1] == 1
    R = RotationMatrix(RotationVector(1e-7, 0, 0))
    assert abs(R.matrix[2, 1] - 1e-7) < 1e-15
    assert abs(R.matrix[1, 1] - np.cos(1e-7)) < 1e-15


def test_assign():
    R = RotationMatrix(dtype=np.float32)
    R.assign(EulerAnglesZyx(np.pi / 2, 0, 0))
    assert R.dtype == np.float32
    assert np.linalg.norm(R.matrix - [[0, -1, 0], [1, 0, 0], [0, 0, 1]]) < 1e-6


def test_rotate():
    v = [1.0, 2.0, 3.0]
    r = Rotation.from_rotvec([1.0, -2.0, 0.5])
    for cls in representations:
        assert np.linalg.norm(from_reference(cls, r).rotate(v) - r.apply(v)) < tol
