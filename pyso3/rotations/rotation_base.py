import abc

import numpy as np

from .. import scalar
from ..traits import ComparisonTraits, ConversionTraits, FixingTraits, MultiplicationTraits


class RotationBase(abc.ABC):
    """
    Operator surface shared by all rotation representations.

    Each representation owns its components as a numpy array (self._data) of
    scalar type float32 or float64. Products, comparisons, conversions and
    fixing are dispatched through the trait tables, by the concrete types
    involved.
    """

    @classmethod
    def _from_array(cls, data, dtype):
        """Wraps components without any check, for values valid by construction."""
        r = cls.__new__(cls)
        r._data = scalar.cast(data, dtype)
        return r

    def _init_from(self, args, n, dtype, default):
        """
        Handles the construction paths common to all representations.
        :param args: constructor arguments
        :param n: number of components
        :param dtype: requested scalar type
        :param default: components used when args is empty
        :return: True if the components were given raw and need checking
        """
        if len(args) == 1 and isinstance(args[0], RotationBase):
            self._data = ConversionTraits.convert(type(self), args[0], dtype)._data
            return False
        if len(args) == 0:
            data = default
        elif len(args) == 1:
            data = args[0]
        elif len(args) == n:
            data = args
        else:
            raise ValueError("{:s} expects 0, 1 or {:d} arguments, got {:d}".format(
                type(self).__name__, n, len(args)))
        self._data = scalar.cast(data, scalar.scalar_type(dtype))
        return len(args) > 0

    def _check(self):
        """Checks the manifold invariant, no-op for unconstrained representations."""

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @abc.abstractmethod
    def inverted(self):
        ...

    def invert(self):
        self._data = self.inverted()._data
        return self

    @abc.abstractmethod
    def get_unique(self):
        """
        Returns the unique representative of this rotation among the
        equivalent parameter sets. Used to compare rotations.
        """

    def set_unique(self):
        self._data = self.get_unique()._data
        return self

    def fix(self):
        """
        Projects the value back onto its manifold after drift, in place.
        :return: self
        """
        return FixingTraits.fix(self)

    def rotate(self, vector) -> np.ndarray:
        """
        Rotates a 3 vector.
        """
        from .rotation_matrix import RotationMatrix
        R = ConversionTraits.convert(RotationMatrix, self, self.dtype)
        return R._data @ np.asarray(vector, dtype=self.dtype)

    def astype(self, dtype):
        """Copy cast to another scalar type."""
        return ConversionTraits.convert(type(self), self, dtype)

    def assign(self, other: 'RotationBase'):
        """
        Sets this rotation from any representation, keeping this scalar type.
        :return: self
        """
        self._data = ConversionTraits.convert(type(self), other, self.dtype)._data
        return self

    def __mul__(self, other):
        if not isinstance(other, RotationBase):
            return NotImplemented
        return MultiplicationTraits.mult(self, other)

    def __eq__(self, other):
        if not isinstance(other, RotationBase) or ComparisonTraits.find(self, other) is None:
            return NotImplemented
        return ComparisonTraits.is_equal(self, other)

    __hash__ = None

    def __str__(self):
        return " ".join(str(v) for v in self._data)

    def __repr__(self):
        return "{:s}({:s}, dtype={:s})".format(
            type(self).__name__, np.array2string(self._data, separator=", "), str(self.dtype))


def unique_equal(a: RotationBase, b: RotationBase) -> bool:
    """Exact equality of the unique representatives."""
    return bool(np.all(a.get_unique()._data == b.get_unique()._data))


def first_nonzero(v) -> float:
    """The first nonzero component of v, 0 if there is none."""
    nz = np.flatnonzero(v)
    return v[nz[0]] if nz.size else 0
