"""
A module for rotation matrices (direction cosine matrices).

This is the standard representation of SO(3). There are 9 parameters and no
singularities. A rotation matrix is orthonormal with determinant +1, so its
inverse is its transpose, and it is the only matrix of its rotation.
"""
import logging

import numpy as np

from .. import config
from ..assertions import assert_matrix_near, assert_scalar_near
from ..traits import ComparisonTraits, FixingTraits, MultiplicationTraits
from .rotation_base import RotationBase

logger = logging.getLogger(__name__)


class RotationMatrix(RotationBase):
    """
    Active rotation matrix.

    RotationMatrix()                        identity
    RotationMatrix(r11, r12, ..., r33)      nine entries, row major, checked
    RotationMatrix(array_3x3)               checked
    RotationMatrix(rotation, dtype=None)    conversion from any representation

    Checked paths require R R^T = I and det(R) = 1 within 1e-4.
    """

    def __init__(self, *args, dtype=None):
        if len(args) == 9:
            args = (np.reshape(args, (3, 3)),)
        if self._init_from(args, 9, dtype, np.eye(3)):
            if self._data.shape != (3, 3):
                raise ValueError("expected a 3x3 matrix, got shape {:s}".format(str(self._data.shape)))
            self._check()

    def _check(self):
        R = self._data
        assert_matrix_near(R @ R.T, np.eye(3), config.ROTATION_MATRIX_TOL,
                           "Input matrix is not orthogonal.")
        assert_scalar_near(np.linalg.det(R), 1, config.ROTATION_MATRIX_TOL,
                           "Input matrix determinant is not 1.")

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the 3x3 matrix."""
        return self._data.copy()

    def set_matrix(self, *args):
        """
        Writes the matrix from a 3x3 array or nine row major entries, without
        checking it.
        """
        data = np.reshape(args[0] if len(args) == 1 else args, (3, 3))
        self._data = np.array(data, dtype=self.dtype)
        return self

    def set_identity(self):
        self._data = np.eye(3, dtype=self.dtype)
        return self

    def inverted(self) -> 'RotationMatrix':
        return RotationMatrix._from_array(self._data.T, self.dtype)

    def transposed(self) -> 'RotationMatrix':
        return RotationMatrix._from_array(self._data.T, self.dtype)

    def transpose(self):
        self._data = self.transposed()._data
        return self

    def determinant(self):
        return np.linalg.det(self._data)

    def get_unique(self) -> 'RotationMatrix':
        # a rotation matrix is always unique
        return RotationMatrix._from_array(self._data, self.dtype)

    def set_unique(self):
        return self

    def __str__(self):
        return str(self._data)


@MultiplicationTraits.register(RotationMatrix, RotationMatrix)
def _rotation_matrix_product(a, b):
    return RotationMatrix._from_array(a._data @ b._data, a.dtype)


@ComparisonTraits.register(RotationMatrix)
def _rotation_matrix_equal(a, b):
    # exact, no tolerance
    return bool(np.all(a._data == b._data))


@FixingTraits.register(RotationMatrix)
def _fix_rotation_matrix(R):
    """
    Rescales all entries by 1/det(R)^(1/3) so that the determinant is 1
    again. Orthogonality is not restored.
    """
    det = R.determinant()
    if not det > 0:
        raise ValueError("cannot fix a rotation matrix with determinant {:g}".format(det))
    factor = 1.0 / det ** (1.0 / 3.0)
    logger.debug("rescaling rotation matrix with determinant %g by %g", det, factor)
    R.set_matrix(factor * R._data)
