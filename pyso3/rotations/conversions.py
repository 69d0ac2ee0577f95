"""
The conversion network between the rotation representations.

Every ordered pair of representations has an entry. Most entries are closed
forms from pyso3.lie.so3, the others go through one intermediate:

RotationMatrix <- EulerAnglesXyz                        via RotationQuaternion
AngleAxis, RotationVector <- RotationMatrix, EulerAnglesXyz, EulerAnglesZyx
                                                        via RotationQuaternion
EulerAnglesXyz, EulerAnglesZyx <- AngleAxis, RotationVector, the other
    Euler convention                                    via RotationMatrix

The source components are cast to the destination scalar type before the
formula is applied. Outputs of closed forms land on the destination manifold
and are not checked again, casts between scalar types are.
"""
from .. import scalar
from ..lie import functions as fn
from ..traits import ConversionTraits, MultiplicationTraits
from .angle_axis import AngleAxis
from .euler_angles import EulerAnglesXyz, EulerAnglesZyx
from .rotation_matrix import RotationMatrix
from .rotation_quaternion import RotationQuaternion
from .rotation_vector import RotationVector

REPRESENTATIONS = (
    AngleAxis,
    RotationVector,
    RotationQuaternion,
    RotationMatrix,
    EulerAnglesXyz,
    EulerAnglesZyx,
)


def _closed_form(dest, f, value, dtype, *extra):
    res = fn.evaluate(f, scalar.cast(value._data, dtype), *extra, dtype=dtype)
    return dest._from_array(res, dtype)


def _register_cast(cls):
    @ConversionTraits.register(cls, cls)
    def _cast(value, dtype):
        res = cls._from_array(value._data, dtype)
        # narrowing may leave the manifold
        res._check()
        return res


def _register_via(dest, source, via):
    @ConversionTraits.register(dest, source)
    def _convert(value, dtype):
        return ConversionTraits.convert(dest, ConversionTraits.convert(via, value, dtype), dtype)


for _cls in REPRESENTATIONS:
    _register_cast(_cls)


# RotationMatrix

@ConversionTraits.register(RotationMatrix, AngleAxis)
def _rotation_matrix_from_angle_axis(aa, dtype):
    return _closed_form(RotationMatrix, fn.dcm_from_angle_axis, aa, dtype)


@ConversionTraits.register(RotationMatrix, RotationVector)
def _rotation_matrix_from_rotation_vector(rv, dtype):
    return _closed_form(RotationMatrix, fn.dcm_from_rotation_vector, rv, dtype,
                        scalar.dummy_precision(dtype))


@ConversionTraits.register(RotationMatrix, RotationQuaternion)
def _rotation_matrix_from_rotation_quaternion(q, dtype):
    return _closed_form(RotationMatrix, fn.dcm_from_quat, q, dtype)


@ConversionTraits.register(RotationMatrix, EulerAnglesZyx)
def _rotation_matrix_from_euler_zyx(zyx, dtype):
    return _closed_form(RotationMatrix, fn.dcm_from_euler_zyx, zyx, dtype)


_register_via(RotationMatrix, EulerAnglesXyz, RotationQuaternion)


# RotationQuaternion

@ConversionTraits.register(RotationQuaternion, AngleAxis)
def _rotation_quaternion_from_angle_axis(aa, dtype):
    return _closed_form(RotationQuaternion, fn.quat_from_angle_axis, aa, dtype)


@ConversionTraits.register(RotationQuaternion, RotationVector)
def _rotation_quaternion_from_rotation_vector(rv, dtype):
    return _closed_form(RotationQuaternion, fn.quat_from_rotation_vector, rv, dtype)


@ConversionTraits.register(RotationQuaternion, RotationMatrix)
def _rotation_quaternion_from_rotation_matrix(R, dtype):
    return _closed_form(RotationQuaternion, fn.quat_from_dcm, R, dtype)


@ConversionTraits.register(RotationQuaternion, EulerAnglesXyz)
def _rotation_quaternion_from_euler_xyz(xyz, dtype):
    return _closed_form(RotationQuaternion, fn.quat_from_euler_xyz, xyz, dtype)


@ConversionTraits.register(RotationQuaternion, EulerAnglesZyx)
def _rotation_quaternion_from_euler_zyx(zyx, dtype):
    return _closed_form(RotationQuaternion, fn.quat_from_euler_zyx, zyx, dtype)


# AngleAxis

@ConversionTraits.register(AngleAxis, RotationQuaternion)
def _angle_axis_from_rotation_quaternion(q, dtype):
    return _closed_form(AngleAxis, fn.angle_axis_from_quat, q, dtype,
                        scalar.dummy_precision(dtype))


@ConversionTraits.register(AngleAxis, RotationVector)
def _angle_axis_from_rotation_vector(rv, dtype):
    return _closed_form(AngleAxis, fn.angle_axis_from_rotation_vector, rv, dtype,
                        scalar.dummy_precision(dtype))


for _cls in (RotationMatrix, EulerAnglesXyz, EulerAnglesZyx):
    _register_via(AngleAxis, _cls, RotationQuaternion)


# RotationVector

@ConversionTraits.register(RotationVector, AngleAxis)
def _rotation_vector_from_angle_axis(aa, dtype):
    data = scalar.cast(aa._data, dtype)
    return RotationVector._from_array(data[0] * data[1:], dtype)


@ConversionTraits.register(RotationVector, RotationQuaternion)
def _rotation_vector_from_rotation_quaternion(q, dtype):
    return _closed_form(RotationVector, fn.rotation_vector_from_quat, q, dtype)


for _cls in (RotationMatrix, EulerAnglesXyz, EulerAnglesZyx):
    _register_via(RotationVector, _cls, RotationQuaternion)


# Euler angles

@ConversionTraits.register(EulerAnglesXyz, RotationMatrix)
def _euler_xyz_from_rotation_matrix(R, dtype):
    return _closed_form(EulerAnglesXyz, fn.euler_xyz_from_dcm, R, dtype,
                        scalar.dummy_precision(dtype))


@ConversionTraits.register(EulerAnglesXyz, RotationQuaternion)
def _euler_xyz_from_rotation_quaternion(q, dtype):
    return _closed_form(EulerAnglesXyz, fn.euler_xyz_from_quat, q, dtype,
                        scalar.dummy_precision(dtype))


@ConversionTraits.register(EulerAnglesZyx, RotationMatrix)
def _euler_zyx_from_rotation_matrix(R, dtype):
    return _closed_form(EulerAnglesZyx, fn.euler_zyx_from_dcm, R, dtype,
                        scalar.dummy_precision(dtype))


@ConversionTraits.register(EulerAnglesZyx, RotationQuaternion)
def _euler_zyx_from_rotation_quaternion(q, dtype):
    return _closed_form(EulerAnglesZyx, fn.euler_zyx_from_quat, q, dtype,
                        scalar.dummy_precision(dtype))


for _cls in (AngleAxis, RotationVector, EulerAnglesZyx):
    _register_via(EulerAnglesXyz, _cls, RotationMatrix)

for _cls in (AngleAxis, RotationVector, EulerAnglesXyz):
    _register_via(EulerAnglesZyx, _cls, RotationMatrix)


# composition of the representations without a closed form product

def _register_product_via_quaternion(cls):
    @MultiplicationTraits.register(cls, cls)
    def _product(a, b):
        q = ConversionTraits.convert(RotationQuaternion, a) * ConversionTraits.convert(RotationQuaternion, b)
        return ConversionTraits.convert(cls, q)


for _cls in (AngleAxis, RotationVector, EulerAnglesXyz, EulerAnglesZyx):
    _register_product_via_quaternion(_cls)

del _cls
