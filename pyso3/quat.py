"""
A module for quaternions (Euler parameters)

Quaternion is a free 4 component value (w, x, y, z). UnitQuaternion is
constrained to unit norm, checked on every construction path that does not
guarantee it.
"""
import numpy as np

from . import config, scalar
from .assertions import assert_scalar_near
from .lie import functions
from .traits import ComparisonTraits, FixingTraits, MultiplicationTraits


class Quaternion:
    """
    Quaternion q = w + x*i + y*j + z*k with no constraint on its norm.

    Quaternion()                    zero quaternion
    Quaternion(w, x, y, z)          from components
    Quaternion([w, x, y, z])        from an array
    Quaternion(q, dtype=float32)    copy, cast to another scalar type
    """

    def __init__(self, *args, dtype=None):
        if len(args) == 0:
            data = self._default()
        elif len(args) == 1 and isinstance(args[0], Quaternion):
            data = args[0]._data
            if dtype is None:
                dtype = args[0].dtype
        elif len(args) == 1:
            data = args[0]
        elif len(args) == 4:
            data = args
        else:
            raise ValueError("expected 0, 1 or 4 arguments, got {:d}".format(len(args)))
        data = scalar.cast(data, scalar.scalar_type(dtype))
        if data.shape != (4,):
            raise ValueError("expected 4 components, got shape {:s}".format(str(data.shape)))
        self._data = data

    def _default(self):
        return np.zeros(4)

    @classmethod
    def _from_array(cls, data, dtype):
        """Wraps components without any check."""
        q = cls.__new__(cls)
        q._data = scalar.cast(data, dtype)
        return q

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def w(self):
        return self._data[0]

    @w.setter
    def w(self, value):
        self._data[0] = value

    @property
    def x(self):
        return self._data[1]

    @x.setter
    def x(self, value):
        self._data[1] = value

    @property
    def y(self):
        return self._data[2]

    @y.setter
    def y(self, value):
        self._data[2] = value

    @property
    def z(self):
        return self._data[3]

    @z.setter
    def z(self, value):
        self._data[3] = value

    @property
    def vector(self) -> np.ndarray:
        """Copy of the components (w, x, y, z)."""
        return self._data.copy()

    def norm(self):
        return np.linalg.norm(self._data)

    def normalize(self):
        """
        Scales the quaternion to unit norm, in place.
        :return: self
        """
        n = self.norm()
        if n == 0:
            raise ValueError("cannot normalize a zero quaternion")
        self._data = (self._data / n).astype(self.dtype)
        return self

    def normalized(self) -> 'UnitQuaternion':
        """
        Returns the unit quaternion with the direction of this one. The result
        is unit by construction and not checked again.
        """
        n = self.norm()
        if n == 0:
            raise ValueError("cannot normalize a zero quaternion")
        return UnitQuaternion._from_array(self._data / n, self.dtype)

    def conjugate(self) -> 'Quaternion':
        return Quaternion._from_array(self._conjugate_data(), self.dtype)

    def inverse(self) -> 'Quaternion':
        """
        The multiplicative inverse, conjugate / |q|^2.
        """
        n_sq = np.dot(self._data, self._data)
        if n_sq == 0:
            raise ValueError("a zero quaternion has no inverse")
        return Quaternion._from_array(self._conjugate_data() / n_sq, self.dtype)

    def _conjugate_data(self):
        return self._data * np.array([1, -1, -1, -1], dtype=self.dtype)

    def assign(self, other: 'Quaternion'):
        """
        Element-wise cast of another quaternion into this one, keeping
        this scalar type.
        :return: self
        """
        self._data = scalar.cast(other._data, self.dtype)
        return self

    def astype(self, dtype):
        return type(self)(self, dtype=dtype)

    def __neg__(self):
        return type(self)._from_array(-self._data, self.dtype)

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion._from_array(self._data + other._data, self.dtype)

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion._from_array(self._data - other._data, self.dtype)

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """
        The product of two quaternions using the hamilton
        convention, so that Dcm(A)*Dcm(B) = Dcm(A*B).
        Scalars scale the components instead.
        :param other: The second quaternion.
        :return: The quaternion product.
        """
        if np.isscalar(other):
            return Quaternion._from_array(self._data * other, self.dtype)
        if not isinstance(other, Quaternion):
            return NotImplemented
        return MultiplicationTraits.mult(self, other)

    def __rmul__(self, other) -> 'Quaternion':
        if not np.isscalar(other):
            return NotImplemented
        return Quaternion._from_array(other * self._data, self.dtype)

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return ComparisonTraits.is_equal(self, other)

    __hash__ = None

    def __str__(self):
        return "{} {} {} {}".format(*self._data)

    def __repr__(self):
        return "{:s}({}, {}, {}, {}, dtype={:s})".format(
            type(self).__name__, *self._data, str(self.dtype))


class UnitQuaternion(Quaternion):
    """
    Quaternion of unit norm.

    UnitQuaternion()                identity (1, 0, 0, 0)
    UnitQuaternion(w, x, y, z)      checked, |q| = 1 +/- 1e-6
    UnitQuaternion(q)               from a Quaternion, checked

    The component setters are not checked, normalize() brings drifted
    components back to unit norm.
    """

    def __init__(self, *args, dtype=None):
        super().__init__(*args, dtype=dtype)
        if len(args) > 0:
            self._check()

    def _default(self):
        return np.array([1.0, 0.0, 0.0, 0.0])

    def _check(self):
        assert_scalar_near(self.norm(), 1, config.UNIT_QUATERNION_TOL,
                           "Input quaternion has not unit length.")

    def conjugate(self) -> 'UnitQuaternion':
        # conjugation keeps the norm
        return UnitQuaternion._from_array(self._conjugate_data(), self.dtype)

    def inverse(self) -> 'UnitQuaternion':
        # the conjugate is the inverse on the unit sphere
        return self.conjugate()

    def assign(self, other: Quaternion):
        super().assign(other)
        self._check()
        return self


@MultiplicationTraits.register(Quaternion, Quaternion)
def _quaternion_product(a, b):
    return Quaternion._from_array(
        functions.evaluate(functions.quat_product, a._data, b._data, dtype=a.dtype), a.dtype)


@MultiplicationTraits.register(UnitQuaternion, UnitQuaternion)
def _unit_quaternion_product(a, b):
    return UnitQuaternion._from_array(
        functions.evaluate(functions.quat_product, a._data, b._data, dtype=a.dtype), a.dtype)


@ComparisonTraits.register(Quaternion)
def _quaternion_equal(a, b):
    # exact, no tolerance
    return bool(np.all(a._data == b._data))


@FixingTraits.register(UnitQuaternion)
def _fix_unit_quaternion(q):
    q.normalize()
