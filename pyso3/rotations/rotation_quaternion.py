"""
A module for rotation quaternions.

4 parameters, no singularities. q and -q represent the same rotation, the
unique representative has a non-negative real part.
"""
import numpy as np

from .. import config
from ..assertions import assert_scalar_near
from ..lie import functions
from ..quat import Quaternion, UnitQuaternion
from ..traits import ComparisonTraits, FixingTraits, MultiplicationTraits
from .rotation_base import RotationBase, first_nonzero, unique_equal


class RotationQuaternion(RotationBase):
    """
    Unit quaternion (w, x, y, z) representing an active rotation.

    RotationQuaternion()                        identity
    RotationQuaternion(w, x, y, z)              checked, |q| = 1 +/- 1e-6
    RotationQuaternion(quaternion)              from a (Unit)Quaternion, checked
    RotationQuaternion(rotation, dtype=None)    conversion from any representation
    """

    def __init__(self, *args, dtype=None):
        if len(args) == 1 and isinstance(args[0], Quaternion):
            if dtype is None:
                dtype = args[0].dtype
            args = (args[0].vector,)
        if self._init_from(args, 4, dtype, [1.0, 0.0, 0.0, 0.0]):
            if self._data.shape != (4,):
                raise ValueError("expected 4 components, got shape {:s}".format(str(self._data.shape)))
            self._check()

    def _check(self):
        assert_scalar_near(self.norm(), 1, config.UNIT_QUATERNION_TOL,
                           "Input quaternion has not unit length.")

    @property
    def w(self):
        return self._data[0]

    @property
    def x(self):
        return self._data[1]

    @property
    def y(self):
        return self._data[2]

    @property
    def z(self):
        return self._data[3]

    @property
    def real(self):
        return self._data[0]

    @property
    def imaginary(self) -> np.ndarray:
        return self._data[1:].copy()

    @property
    def vector(self) -> np.ndarray:
        """Copy of the components (w, x, y, z)."""
        return self._data.copy()

    def norm(self):
        return np.linalg.norm(self._data)

    def to_unit_quaternion(self) -> UnitQuaternion:
        return UnitQuaternion._from_array(self._data, self.dtype)

    def conjugated(self) -> 'RotationQuaternion':
        return RotationQuaternion._from_array(
            self._data * np.array([1, -1, -1, -1], dtype=self.dtype), self.dtype)

    def conjugate(self):
        self._data = self.conjugated()._data
        return self

    def inverted(self) -> 'RotationQuaternion':
        return self.conjugated()

    def get_unique(self) -> 'RotationQuaternion':
        """
        Non-negative real part. For half turns (w = 0) the first nonzero
        imaginary component is made positive.
        """
        w = self._data[0]
        if w < 0 or (w == 0 and first_nonzero(self._data[1:]) < 0):
            return RotationQuaternion._from_array(-self._data, self.dtype)
        return RotationQuaternion._from_array(self._data, self.dtype)

    def __str__(self):
        return "{} {} {} {}".format(*self._data)


@MultiplicationTraits.register(RotationQuaternion, RotationQuaternion)
def _rotation_quaternion_product(a, b):
    return RotationQuaternion._from_array(
        functions.evaluate(functions.quat_product, a._data, b._data, dtype=a.dtype), a.dtype)


ComparisonTraits.register(RotationQuaternion)(unique_equal)


@FixingTraits.register(RotationQuaternion)
def _fix_rotation_quaternion(q):
    q._data = (q._data / q.norm()).astype(q.dtype)
