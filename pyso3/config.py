"""
Runtime configuration of pyso3.

Invariant checks (unit norm of quaternions, orthonormality and determinant of
rotation matrices, unit axis of angle-axis rotations) run on every checked
construction path while validation is enabled, which is the default.

Long composition chains can skip them for throughput. The switch is explicit:

* ``PYSO3_VALIDATE=0`` in the environment before import,
* ``set_validation(False)`` at runtime,
* ``with validation(False): ...`` for a block of code.
"""
import contextlib
import logging
import os

logger = logging.getLogger(__name__)

UNIT_QUATERNION_TOL = 1e-6
ROTATION_MATRIX_TOL = 1e-4
ANGLE_AXIS_TOL = 1e-4

_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


_validate = _env_flag("PYSO3_VALIDATE", True)
if not _validate:
    logger.info("manifold validation disabled by PYSO3_VALIDATE")


def validation_enabled() -> bool:
    return _validate


def set_validation(enabled: bool):
    global _validate
    enabled = bool(enabled)
    if enabled != _validate:
        logger.info("manifold validation %s", "enabled" if enabled else "disabled")
    _validate = enabled


@contextlib.contextmanager
def validation(enabled: bool):
    """
    Temporarily enables or disables the invariant checks.
    :param enabled: validation mode inside the block
    """
    previous = _validate
    set_validation(enabled)
    try:
        yield
    finally:
        set_validation(previous)
