"""
A module for angle-axis rotations.

4 parameters, the angle and the unit rotation axis. The axis is undefined
for a zero angle, where (1, 0, 0) is used.
"""
import numpy as np

from .. import config
from ..assertions import assert_scalar_near
from ..traits import ComparisonTraits, FixingTraits
from .rotation_base import RotationBase, first_nonzero, unique_equal


def wrap_angle(angle):
    """Wraps an angle to [-pi, pi)."""
    return np.mod(angle + np.pi, 2 * np.pi) - np.pi


class AngleAxis(RotationBase):
    """
    AngleAxis()                             identity, angle 0 about (1, 0, 0)
    AngleAxis(angle, axis)                  checked, |axis| = 1 +/- 1e-4
    AngleAxis(angle, x, y, z)               checked
    AngleAxis(rotation, dtype=None)         conversion from any representation
    """

    def __init__(self, *args, dtype=None):
        if len(args) == 2:
            args = (np.concatenate([[args[0]], np.ravel(args[1])]),)
        if self._init_from(args, 4, dtype, [0.0, 1.0, 0.0, 0.0]):
            if self._data.shape != (4,):
                raise ValueError("expected an angle and a 3 axis, got {:d} components".format(
                    self._data.size))
            self._check()

    def _check(self):
        assert_scalar_near(np.linalg.norm(self._data[1:]), 1, config.ANGLE_AXIS_TOL,
                           "Input rotation axis has not unit length.")

    @property
    def angle(self):
        return self._data[0]

    @property
    def axis(self) -> np.ndarray:
        return self._data[1:].copy()

    @property
    def vector(self) -> np.ndarray:
        """Copy of (angle, x, y, z)."""
        return self._data.copy()

    def inverted(self) -> 'AngleAxis':
        data = self._data.copy()
        data[0] = -data[0]
        return AngleAxis._from_array(data, self.dtype)

    def get_unique(self) -> 'AngleAxis':
        """
        Angle in [0, pi]. For half turns the first nonzero axis component is
        made positive.
        """
        data = self._data.copy()
        data[0] = wrap_angle(data[0])
        if data[0] < 0:
            data = -data
        if data[0] == np.pi and first_nonzero(data[1:]) < 0:
            data[1:] = -data[1:]
        return AngleAxis._from_array(data, self.dtype)


@FixingTraits.register(AngleAxis)
def _fix_angle_axis(aa):
    aa._data[1:] = aa._data[1:] / np.linalg.norm(aa._data[1:])


ComparisonTraits.register(AngleAxis)(unique_equal)
