"""
Invariant checks for values that must lie on a manifold.
"""
import numpy as np

from . import config


class ManifoldViolation(AssertionError):
    """
    A value was constructed off its manifold, beyond tolerance.

    This signals a bug upstream of the construction, it is not meant to be
    handled. Narrowing a value to a lower precision raises the same error
    when the narrowed result leaves the manifold.
    """


def assert_scalar_near(actual, expected, tol, message):
    if not config.validation_enabled():
        return
    # written so that nan fails
    if not abs(actual - expected) <= tol:
        raise ManifoldViolation(
            "{:s} expected: {:g} actual: {:g} tolerance: {:g}".format(
                message, float(expected), float(actual), tol
            )
        )


def assert_matrix_near(actual, expected, tol, message):
    if not config.validation_enabled():
        return
    actual = np.asarray(actual)
    expected = np.asarray(expected)
    if not np.all(np.abs(actual - expected) <= tol):
        raise ManifoldViolation(
            "{:s}\nexpected:\n{:s}\nactual:\n{:s}\ntolerance: {:g}".format(
                message, str(expected), str(actual), tol
            )
        )
