"""
Scalar types of the rotation representations.

Every value stores its components as a numpy array of either single
(float32) or double (float64) precision.
"""
import numpy as np

SCALAR_TYPES = (np.float32, np.float64)

# precision used to switch to linearized formulas near singularities
_DUMMY_PRECISION = {
    np.dtype(np.float32): 1e-5,
    np.dtype(np.float64): 1e-12,
}


def scalar_type(dtype=None, default=np.float64) -> np.dtype:
    """
    Resolves a requested scalar type.
    :param dtype: float32, float64 or None
    :param default: type used when dtype is None
    :return: the numpy dtype
    """
    dtype = np.dtype(default if dtype is None else dtype)
    if dtype.type not in SCALAR_TYPES:
        raise TypeError("unsupported scalar type {:s}, expected float32 or float64".format(str(dtype)))
    return dtype


def dummy_precision(dtype) -> float:
    return _DUMMY_PRECISION[scalar_type(dtype)]


def cast(data, dtype) -> np.ndarray:
    """Element-wise cast, always returns a copy."""
    return np.array(data, dtype=scalar_type(dtype), copy=True)
