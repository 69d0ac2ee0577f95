"""
Dispatch tables of the rotation representations.

Conversions and products are looked up by the pair of concrete types
involved, comparisons and fixing by a single type. Entries are registered
with the class decorators below, next to the representations they concern.

    @ConversionTraits.register(RotationMatrix, AngleAxis)
    def _(aa, dtype):
        ...
"""
import logging

logger = logging.getLogger(__name__)


def _lookup(table, types):
    """
    Finds the entry for a tuple of types, walking the MRO of each type,
    left-most type first.
    """
    if len(types) == 1:
        for cls in types[0].__mro__:
            if (cls,) in table:
                return table[(cls,)]
        return None
    for cls in types[0].__mro__:
        res = _lookup({k[1:]: v for k, v in table.items() if k[0] is cls}, types[1:])
        if res is not None:
            return res
    return None


def _name(cls):
    return getattr(cls, "__name__", str(cls))


class ConversionTraits:
    """
    Conversion between representations, keyed by (destination, source).

    An entry is a function (source, dtype) -> destination where dtype is the
    scalar type of the destination. The result satisfies the invariant of the
    destination.
    """

    _table = {}

    def __init__(self):
        raise RuntimeError('this class is just for scoping, do not instantiate')

    @classmethod
    def register(cls, dest, source):
        def decorator(f):
            logger.debug("conversion %s -> %s", _name(source), _name(dest))
            cls._table[(dest, source)] = f
            return f
        return decorator

    @classmethod
    def convert(cls, dest, value, dtype=None):
        """
        Converts a rotation to another representation.
        :param dest: the destination representation
        :param value: the source rotation
        :param dtype: scalar type of the result, defaults to the source's
        :return: the converted rotation
        """
        f = cls._table.get((dest, type(value)))
        if f is None:
            f = _lookup({k[1:]: v for k, v in cls._table.items() if k[0] is dest}, (type(value),))
        if f is None:
            raise TypeError("no conversion from {:s} to {:s}".format(
                _name(type(value)), _name(dest)))
        return f(value, value.dtype if dtype is None else dtype)

    @classmethod
    def pairs(cls):
        return sorted((_name(d), _name(s)) for d, s in cls._table)


class MultiplicationTraits:
    """
    Composition, keyed by the (left, right) operand types.

    An entry is a function (a, b) -> a * b, operand order is preserved.
    """

    _table = {}

    def __init__(self):
        raise RuntimeError('this class is just for scoping, do not instantiate')

    @classmethod
    def register(cls, lhs, rhs):
        def decorator(f):
            logger.debug("multiplication %s * %s", _name(lhs), _name(rhs))
            cls._table[(lhs, rhs)] = f
            return f
        return decorator

    @classmethod
    def find(cls, lhs, rhs):
        return _lookup(cls._table, (type(lhs), type(rhs)))

    @classmethod
    def mult(cls, lhs, rhs):
        f = cls.find(lhs, rhs)
        if f is None:
            raise TypeError("cannot compose {:s} with {:s}, convert first".format(
                _name(type(lhs)), _name(type(rhs))))
        if lhs.dtype != rhs.dtype:
            raise TypeError("cannot compose scalar types {:s} and {:s}".format(
                str(lhs.dtype), str(rhs.dtype)))
        return f(lhs, rhs)


class ComparisonTraits:
    """
    Equality of two values of the same representation.

    An entry is registered for one type and applies to its subclasses.
    """

    _table = {}

    def __init__(self):
        raise RuntimeError('this class is just for scoping, do not instantiate')

    @classmethod
    def register(cls, kind):
        def decorator(f):
            cls._table[(kind,)] = f
            return f
        return decorator

    @classmethod
    def find(cls, a, b):
        """
        Returns the predicate for the most derived registered type that
        both values are instances of, or None.
        """
        for kind in type(a).__mro__:
            f = cls._table.get((kind,))
            if f is not None:
                return f if isinstance(b, kind) else None
        return None

    @classmethod
    def is_equal(cls, a, b):
        f = cls.find(a, b)
        if f is None:
            raise TypeError("cannot compare {:s} with {:s}".format(
                _name(type(a)), _name(type(b))))
        return f(a, b)


class FixingTraits:
    """
    Projection of a drifted value back onto its manifold, in place.
    """

    _table = {}

    def __init__(self):
        raise RuntimeError('this class is just for scoping, do not instantiate')

    @classmethod
    def register(cls, kind):
        def decorator(f):
            cls._table[(kind,)] = f
            return f
        return decorator

    @classmethod
    def fix(cls, value):
        f = _lookup(cls._table, (type(value),))
        if f is None:
            raise TypeError("no fixing for {:s}".format(_name(type(value))))
        f(value)
        return value
