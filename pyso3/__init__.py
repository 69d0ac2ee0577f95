"""
Python SO(3) rotation algebra.

Rotations in interchangeable parameterizations (unit quaternion, rotation
matrix, angle-axis, rotation vector, Euler angles) that check their manifold
constraints on construction, convert into each other through one dispatch
table keyed by the pair of representations, and can be fixed after
floating point drift.
"""
from .assertions import ManifoldViolation
from .quat import Quaternion, UnitQuaternion
from .rotations import (
    AngleAxis,
    EulerAnglesXyz,
    EulerAnglesZyx,
    RotationBase,
    RotationMatrix,
    RotationQuaternion,
    RotationVector,
)
from .traits import ComparisonTraits, ConversionTraits, FixingTraits, MultiplicationTraits

__version__ = "0.1.0"
