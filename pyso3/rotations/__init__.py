"""
This package contains a set of representations for SO(3). The 3D rotation Lie Group.

rotation_matrix: 9 parameters, no singularities
rotation_quaternion: 4 parameters, no singularities, q and -q are the same rotation
angle_axis: 4 parameters, axis undefined at zero angle
rotation_vector: 3 parameters, singularity at rotation of 2*pi
euler_angles: 3 parameters, singularity at pitch = +/- pi/2

Any representation converts to any other, see conversions.
"""
from .rotation_base import RotationBase
from .rotation_matrix import RotationMatrix
from .rotation_quaternion import RotationQuaternion
from .angle_axis import AngleAxis
from .rotation_vector import RotationVector
from .euler_angles import EulerAngles, EulerAnglesXyz, EulerAnglesZyx
from . import conversions
