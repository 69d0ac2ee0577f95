"""
A module for rotation vectors, the angle times the unit axis.

3 parameters, no constraint. This is the Lie algebra of SO(3), the rotation
matrix is its exponential map.
"""
import numpy as np

from .. import scalar
from ..traits import ComparisonTraits, FixingTraits
from .angle_axis import wrap_angle
from .rotation_base import RotationBase, first_nonzero, unique_equal


class RotationVector(RotationBase):
    """
    RotationVector()                            identity (0, 0, 0)
    RotationVector(x, y, z)
    RotationVector([x, y, z])
    RotationVector(rotation, dtype=None)        conversion from any representation
    """

    def __init__(self, *args, dtype=None):
        self._init_from(args, 3, dtype, np.zeros(3))
        if self._data.shape != (3,):
            raise ValueError("expected 3 components, got shape {:s}".format(str(self._data.shape)))

    @property
    def x(self):
        return self._data[0]

    @property
    def y(self):
        return self._data[1]

    @property
    def z(self):
        return self._data[2]

    @property
    def vector(self) -> np.ndarray:
        return self._data.copy()

    def norm(self):
        return np.linalg.norm(self._data)

    def inverted(self) -> 'RotationVector':
        return RotationVector._from_array(-self._data, self.dtype)

    def get_unique(self) -> 'RotationVector':
        """
        Norm in [0, pi]. For half turns the first nonzero component is made
        positive.
        """
        n = self.norm()
        if n < scalar.dummy_precision(self.dtype):
            return RotationVector._from_array(self._data, self.dtype)
        angle = wrap_angle(n)
        data = self._data / n * angle
        # wrap_angle maps a half turn to -pi
        if angle == -np.pi and first_nonzero(data) < 0:
            data = -data
        return RotationVector._from_array(data, self.dtype)


@FixingTraits.register(RotationVector)
def _fix_rotation_vector(v):
    # unconstrained
    pass


ComparisonTraits.register(RotationVector)(unique_equal)
