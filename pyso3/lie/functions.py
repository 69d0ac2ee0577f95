"""
Numeric evaluation of the symbolic closed forms.

Each closed form of so3 is compiled once into a casadi Function. Inputs are
numpy arrays of any supported scalar type, evaluation happens in double
precision and the result is cast to the requested scalar type.
"""
import casadi as ca
import numpy as np

from .so3 import Dcm, Quat, AngleAxis, RotationVector, EulerXyz, EulerZyx


def _function(name, expr, *shapes):
    args = [ca.SX.sym("x{:d}".format(i), *shape) for i, shape in enumerate(shapes)]
    return ca.Function(name, args, [expr(*args)])


quat_product = _function("quat_product", Quat.product, (4, 1), (4, 1))
quat_from_dcm = _function("quat_from_dcm", Quat.from_dcm, (3, 3))
quat_from_angle_axis = _function("quat_from_angle_axis", Quat.from_angle_axis, (4, 1))
quat_from_rotation_vector = _function(
    "quat_from_rotation_vector", Quat.from_rotation_vector, (3, 1))
quat_from_euler_xyz = _function("quat_from_euler_xyz", Quat.from_euler_xyz, (3, 1))
quat_from_euler_zyx = _function("quat_from_euler_zyx", Quat.from_euler_zyx, (3, 1))

dcm_from_quat = _function("dcm_from_quat", Dcm.from_quat, (4, 1))
dcm_from_angle_axis = _function("dcm_from_angle_axis", Dcm.from_angle_axis, (4, 1))
dcm_from_rotation_vector = _function(
    "dcm_from_rotation_vector", Dcm.from_rotation_vector, (3, 1), (1, 1))
dcm_from_euler_zyx = _function("dcm_from_euler_zyx", Dcm.from_euler_zyx, (3, 1))

angle_axis_from_quat = _function(
    "angle_axis_from_quat", AngleAxis.from_quat, (4, 1), (1, 1))
angle_axis_from_rotation_vector = _function(
    "angle_axis_from_rotation_vector", AngleAxis.from_rotation_vector, (3, 1), (1, 1))

rotation_vector_from_quat = _function(
    "rotation_vector_from_quat", RotationVector.from_quat, (4, 1))

euler_xyz_from_dcm = _function("euler_xyz_from_dcm", EulerXyz.from_dcm, (3, 3), (1, 1))
euler_xyz_from_quat = _function("euler_xyz_from_quat", EulerXyz.from_quat, (4, 1), (1, 1))
euler_zyx_from_dcm = _function("euler_zyx_from_dcm", EulerZyx.from_dcm, (3, 3), (1, 1))
euler_zyx_from_quat = _function("euler_zyx_from_quat", EulerZyx.from_quat, (4, 1), (1, 1))


def _to_dm(a):
    a = np.asarray(a, dtype=np.float64)
    if a.ndim < 2:
        a = a.reshape(-1, 1)
    return ca.DM(a)


def evaluate(f: ca.Function, *args, dtype=np.float64) -> np.ndarray:
    """
    Evaluates a compiled closed form.
    :param f: the casadi Function
    :param args: numpy inputs, vectors may be flat
    :param dtype: scalar type of the result
    :return: the result, flat for column vectors
    """
    res = np.asarray(f(*[_to_dm(a) for a in args]).full(), dtype=dtype)
    if res.shape[1] == 1:
        res = res.ravel()
    return res
