"""
A module for Euler angles.

3 parameters, singularity at pitch = +/- pi/2.

EulerAnglesXyz (roll, pitch, yaw): rotations about x, then the new y, then
    the new z axis, R = Rx(roll) Ry(pitch) Rz(yaw)
EulerAnglesZyx (yaw, pitch, roll): rotations about the fixed z, y then x
    axes, R = Rx(roll) Ry(pitch) Rz(yaw)
"""
import numpy as np

from ..traits import ComparisonTraits, FixingTraits
from .angle_axis import wrap_angle
from .rotation_base import RotationBase, unique_equal
from .rotation_matrix import RotationMatrix


class EulerAngles(RotationBase):
    """
    Common part of both conventions, pitch is stored in the middle.
    """

    def __init__(self, *args, dtype=None):
        self._init_from(args, 3, dtype, np.zeros(3))
        if self._data.shape != (3,):
            raise ValueError("expected 3 angles, got shape {:s}".format(str(self._data.shape)))

    @property
    def pitch(self):
        return self._data[1]

    @property
    def y(self):
        return self._data[1]

    @property
    def vector(self) -> np.ndarray:
        return self._data.copy()

    def inverted(self):
        return type(self)(RotationMatrix(self).inverted())

    def get_unique(self):
        """
        Pitch in [-pi/2, pi/2], the outer angles in [-pi, pi).

        Uses (a, pitch, b) = (a + pi, pi - pitch, b + pi), which holds for
        both conventions.
        """
        a, pitch, b = self._data.astype(np.float64)
        pitch = wrap_angle(pitch)
        if pitch > np.pi / 2:
            pitch = np.pi - pitch
            a += np.pi
            b += np.pi
        elif pitch < -np.pi / 2:
            pitch = -np.pi - pitch
            a += np.pi
            b += np.pi
        return type(self)._from_array([wrap_angle(a), pitch, wrap_angle(b)], self.dtype)


class EulerAnglesXyz(EulerAngles):
    """
    EulerAnglesXyz()                            identity
    EulerAnglesXyz(roll, pitch, yaw)
    EulerAnglesXyz([roll, pitch, yaw])
    EulerAnglesXyz(rotation, dtype=None)        conversion from any representation
    """

    @property
    def roll(self):
        return self._data[0]

    @property
    def yaw(self):
        return self._data[2]

    @property
    def x(self):
        return self._data[0]

    @property
    def z(self):
        return self._data[2]


class EulerAnglesZyx(EulerAngles):
    """
    EulerAnglesZyx()                            identity
    EulerAnglesZyx(yaw, pitch, roll)
    EulerAnglesZyx([yaw, pitch, roll])
    EulerAnglesZyx(rotation, dtype=None)        conversion from any representation
    """

    @property
    def yaw(self):
        return self._data[0]

    @property
    def roll(self):
        return self._data[2]

    @property
    def x(self):
        return self._data[2]

    @property
    def z(self):
        return self._data[0]


@FixingTraits.register(EulerAngles)
def _fix_euler_angles(e):
    # unconstrained
    pass


ComparisonTraits.register(EulerAnglesXyz)(unique_equal)
ComparisonTraits.register(EulerAnglesZyx)(unique_equal)
