from pyso3 import ManifoldViolation, RotationMatrix, UnitQuaternion, config, scalar
import numpy as np
import pytest


def test_validation_toggle():
    assert config.validation_enabled()
    with config.validation(False):
        assert not config.validation_enabled()
        R = RotationMatrix(2 * np.eye(3))
        UnitQuaternion(1, 2, 3, 4)
    assert config.validation_enabled()
    # the value keeps its contents, it can be fixed later
    assert abs(R.determinant() - 8) < 1e-12
    with pytest.raises(ManifoldViolation):
        RotationMatrix(2 * np.eye(3))


def test_set_validation():
    config.set_validation(False)
    try:
        RotationMatrix(2 * np.eye(3))
    finally:
        config.set_validation(True)
    with pytest.raises(ManifoldViolation):
        RotationMatrix(2 * np.eye(3))


def test_messages():
    with pytest.raises(ManifoldViolation, match="determinant is not 1"):
        RotationMatrix(np.diag([1, 1, -1]))
    with pytest.raises(ManifoldViolation, match="not orthogonal"):
        RotationMatrix(2 * np.eye(3))
    with pytest.raises(ManifoldViolation, match="not unit length"):
        UnitQuaternion(1, 1, 0, 0)


def test_nan_fails():
    with pytest.raises(ManifoldViolation):
        UnitQuaternion(np.nan, 0, 0, 0)
    with pytest.raises(ManifoldViolation):
        RotationMatrix(np.full((3, 3), np.nan))


def test_env_flag(monkeypatch):
    monkeypatch.setenv("PYSO3_VALIDATE", "0")
    assert not config._env_flag("PYSO3_VALIDATE", True)
    monkeypatch.setenv("PYSO3_VALIDATE", "yes")
    assert config._env_flag("PYSO3_VALIDATE", False)
    monkeypatch.delenv("PYSO3_VALIDATE")
    assert config._env_flag("PYSO3_VALIDATE", True)


def test_scalar_types():
    assert scalar.scalar_type() == np.float64
    assert scalar.scalar_type(np.float32) == np.float32
    with pytest.raises(TypeError):
        scalar.scalar_type(np.int32)
    assert scalar.dummy_precision(np.float32) == 1e-5
    assert scalar.dummy_precision(np.float64) == 1e-12
    a = np.zeros(3)
    assert scalar.cast(a, np.float64) is not a
