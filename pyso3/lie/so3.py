"""
Closed form products and conversions of the SO(3) parameterizations.

All quaternions are (w, x, y, z) with the hamilton product, so that
Dcm.from_quat(a * b) = Dcm.from_quat(a) @ Dcm.from_quat(b). All rotations are
active.

Euler angle conventions:

EulerXyz (roll, pitch, yaw): about x, then the new y, then the new z axis,
    R = Rx(roll) Ry(pitch) Rz(yaw)
EulerZyx (yaw, pitch, roll): about the fixed z, y then x axes,
    R = Rx(roll) Ry(pitch) Rz(yaw)

Both describe the same matrix, they differ in the order the angles are
stored in.
"""
import abc

import casadi as ca

from .util import C1, C3


class _SO3Base(abc.ABC):
    @abc.abstractmethod
    def identity(self) -> ca.SX:
        ...

    def wedge(self, v):
        X = ca.SX(3, 3)
        theta0 = v[0]
        theta1 = v[1]
        theta2 = v[2]
        X[0, 1] = -theta2
        X[0, 2] = theta1
        X[1, 0] = theta2
        X[1, 2] = -theta0
        X[2, 0] = -theta1
        X[2, 1] = theta0
        return X


class _Dcm(_SO3Base):
    def identity(self) -> ca.SX:
        return ca.SX.eye(3)

    def from_quat(self, q):
        assert q.shape == (4, 1)
        R = ca.SX(3, 3)
        a = q[0]
        b = q[1]
        c = q[2]
        d = q[3]
        aa = a * a
        ab = a * b
        ac = a * c
        ad = a * d
        bb = b * b
        bc = b * c
        bd = b * d
        cc = c * c
        cd = c * d
        dd = d * d
        R[0, 0] = aa + bb - cc - dd
        R[0, 1] = 2 * (bc - ad)
        R[0, 2] = 2 * (bd + ac)
        R[1, 0] = 2 * (bc + ad)
        R[1, 1] = aa + cc - bb - dd
        R[1, 2] = 2 * (cd - ab)
        R[2, 0] = 2 * (bd - ac)
        R[2, 1] = 2 * (cd + ab)
        R[2, 2] = aa + dd - bb - cc
        return R

    def from_angle_axis(self, aa):
        """
        Rodrigues' formula.
        :param aa: angle followed by the unit axis, (4, 1)
        :return: The DCM.
        """
        assert aa.shape == (4, 1)
        angle = aa[0]
        K = self.wedge(aa[1:])
        return ca.SX.eye(3) + ca.sin(angle) * K + (1 - ca.cos(angle)) * K @ K

    def from_rotation_vector(self, v, eps):
        """
        The exponential map of a rotation vector.

        Below eps the closed form is replaced by its linearization
        I + wedge(v), the closed form divides by the squared norm.
        :param v: rotation vector, (3, 1)
        :param eps: norm below which the linearization is used
        :return: The DCM.
        """
        assert v.shape == (3, 1)
        v1 = v[0]
        v2 = v[1]
        v3 = v[2]
        n = ca.norm_2(v)

        R_small = ca.SX.eye(3) + self.wedge(v)

        t3 = n * 0.5
        t2 = ca.sin(t3)
        t4 = ca.cos(t3)
        t5 = 1 / (n * n)
        t6 = t4 * n * v3
        t7 = t2 * v1 * v2
        t8 = t2 * t2
        t9 = v1 * v1
        t10 = v2 * v2
        t11 = v3 * v3
        t12 = n * n
        t13 = t4 * t4
        t14 = t12 * t13
        t15 = t2 * v1 * v3
        t16 = t4 * n * v1
        t17 = t2 * v2 * v3
        R = ca.SX(3, 3)
        R[0, 0] = t5 * (t14 - t8 * (-t9 + t10 + t11))
        R[1, 0] = t2 * t5 * (t6 + t7) * 2
        R[2, 0] = t2 * t5 * (t15 - t4 * n * v2) * 2
        R[0, 1] = t2 * t5 * (t6 - t7) * -2
        R[1, 1] = t5 * (t14 - t8 * (t9 - t10 + t11))
        R[2, 1] = t2 * t5 * (t16 + t17) * 2
        R[0, 2] = t2 * t5 * (t15 + t4 * n * v2) * 2
        R[1, 2] = t2 * t5 * (t16 - t17) * -2
        R[2, 2] = t5 * (t14 - t8 * (t9 + t10 - t11))
        return ca.if_else(n < eps, R_small, R)

    def from_euler_zyx(self, e):
        """
        Converts (yaw, pitch, roll) to a DCM, R = Rx(roll) Ry(pitch) Rz(yaw).
        :param e: (yaw, pitch, roll), (3, 1)
        :return: The DCM.
        """
        assert e.shape == (3, 1)
        phi = e[2]
        theta = e[1]
        psi = e[0]
        t2 = ca.cos(theta)
        t3 = ca.sin(psi)
        t4 = ca.cos(psi)
        t5 = ca.sin(theta)
        t6 = ca.cos(phi)
        t7 = ca.sin(phi)
        R = ca.SX(3, 3)
        R[0, 0] = t2 * t4
        R[0, 1] = -t2 * t3
        R[0, 2] = t5
        R[1, 0] = t3 * t6 + t4 * t5 * t7
        R[1, 1] = t4 * t6 - t3 * t5 * t7
        R[1, 2] = -t2 * t7
        R[2, 0] = t3 * t7 - t4 * t5 * t6
        R[2, 1] = t4 * t7 + t3 * t5 * t6
        R[2, 2] = t2 * t6
        return R


Dcm = _Dcm()


class _Quat(_SO3Base):
    def identity(self) -> ca.SX:
        return ca.SX([1, 0, 0, 0])

    def product(self, a, b):
        assert a.shape == (4, 1) or a.shape == (4,)
        assert b.shape == (4, 1) or b.shape == (4,)
        r1 = a[0]
        v1 = a[1:]
        r2 = b[0]
        v2 = b[1:]
        res = ca.SX(4, 1)
        res[0] = r1 * r2 - ca.dot(v1, v2)
        res[1:] = r1 * v2 + r2 * v1 + ca.cross(v1, v2)
        return res

    def unique(self, q):
        """The antipodal representative with non-negative real part."""
        return ca.if_else(q[0] < 0, -q, q)

    def from_dcm(self, R):
        assert R.shape == (3, 3)
        b1 = 0.5 * ca.sqrt(1 + R[0, 0] + R[1, 1] + R[2, 2])
        b2 = 0.5 * ca.sqrt(1 + R[0, 0] - R[1, 1] - R[2, 2])
        b3 = 0.5 * ca.sqrt(1 - R[0, 0] + R[1, 1] - R[2, 2])
        b4 = 0.5 * ca.sqrt(1 - R[0, 0] - R[1, 1] + R[2, 2])

        q1 = ca.SX(4, 1)
        q1[0] = b1
        q1[1] = (R[2, 1] - R[1, 2]) / (4 * b1)
        q1[2] = (R[0, 2] - R[2, 0]) / (4 * b1)
        q1[3] = (R[1, 0] - R[0, 1]) / (4 * b1)

        q2 = ca.SX(4, 1)
        q2[0] = (R[2, 1] - R[1, 2]) / (4 * b2)
        q2[1] = b2
        q2[2] = (R[0, 1] + R[1, 0]) / (4 * b2)
        q2[3] = (R[0, 2] + R[2, 0]) / (4 * b2)

        q3 = ca.SX(4, 1)
        q3[0] = (R[0, 2] - R[2, 0]) / (4 * b3)
        q3[1] = (R[0, 1] + R[1, 0]) / (4 * b3)
        q3[2] = b3
        q3[3] = (R[1, 2] + R[2, 1]) / (4 * b3)

        q4 = ca.SX(4, 1)
        q4[0] = (R[1, 0] - R[0, 1]) / (4 * b4)
        q4[1] = (R[0, 2] + R[2, 0]) / (4 * b4)
        q4[2] = (R[1, 2] + R[2, 1]) / (4 * b4)
        q4[3] = b4

        q = ca.if_else(
            ca.trace(R) > 0,
            q1,
            ca.if_else(
                ca.logic_and(R[0, 0] > R[1, 1], R[0, 0] > R[2, 2]),
                q2,
                ca.if_else(R[1, 1] > R[2, 2], q3, q4),
            ),
        )
        return q

    def from_angle_axis(self, aa):
        assert aa.shape == (4, 1)
        half = aa[0] / 2
        return ca.vertcat(ca.cos(half), ca.sin(half) * aa[1:])

    def from_rotation_vector(self, v):
        assert v.shape == (3, 1)
        half = ca.norm_2(v) / 2
        # sin(theta/2)/theta = sinc(theta/2)/2, finite at the origin
        return ca.vertcat(ca.cos(half), 0.5 * C1(half) * v)

    def from_euler_xyz(self, e):
        """
        Converts (roll, pitch, yaw) to a quaternion, q = qx(roll) qy(pitch) qz(yaw).
        :param e: (roll, pitch, yaw), (3, 1)
        :return: The quaternion.
        """
        assert e.shape == (3, 1) or e.shape == (3,)
        q = ca.SX(4, 1)
        cosPhi_2 = ca.cos(e[0] / 2)
        cosTheta_2 = ca.cos(e[1] / 2)
        cosPsi_2 = ca.cos(e[2] / 2)
        sinPhi_2 = ca.sin(e[0] / 2)
        sinTheta_2 = ca.sin(e[1] / 2)
        sinPsi_2 = ca.sin(e[2] / 2)
        q[0] = cosPhi_2 * cosTheta_2 * cosPsi_2 - sinPhi_2 * sinTheta_2 * sinPsi_2
        q[1] = sinPhi_2 * cosTheta_2 * cosPsi_2 + cosPhi_2 * sinTheta_2 * sinPsi_2
        q[2] = cosPhi_2 * sinTheta_2 * cosPsi_2 - sinPhi_2 * cosTheta_2 * sinPsi_2
        q[3] = cosPhi_2 * cosTheta_2 * sinPsi_2 + sinPhi_2 * sinTheta_2 * cosPsi_2
        return q

    def from_euler_zyx(self, e):
        """
        Converts (yaw, pitch, roll) to a quaternion, q = qx(roll) qy(pitch) qz(yaw).
        :param e: (yaw, pitch, roll), (3, 1)
        :return: The quaternion.
        """
        assert e.shape == (3, 1) or e.shape == (3,)
        return self.from_euler_xyz(ca.vertcat(e[2], e[1], e[0]))


Quat = _Quat()


class _AngleAxis(_SO3Base):
    """Angle followed by the unit axis, (4, 1)."""

    def identity(self) -> ca.SX:
        return ca.SX([0, 1, 0, 0])

    def from_quat(self, q, eps):
        assert q.shape == (4, 1)
        v = q[1:]
        n = ca.norm_2(v)
        axis = ca.if_else(q[0] < 0, -v, v) / n
        res = ca.vertcat(2 * ca.atan2(n, ca.fabs(q[0])), axis)
        return ca.if_else(n < eps, self.identity(), res)

    def from_rotation_vector(self, v, eps):
        assert v.shape == (3, 1)
        n = ca.norm_2(v)
        return ca.if_else(n < eps, self.identity(), ca.vertcat(n, v / n))


AngleAxis = _AngleAxis()


class _RotationVector(_SO3Base):
    def identity(self) -> ca.SX:
        return ca.SX([0, 0, 0])

    def from_quat(self, q):
        """
        The logarithmic map, returns a rotation vector with norm in [0, pi].
        """
        assert q.shape == (4, 1)
        q = Quat.unique(q)
        half = ca.atan2(ca.norm_2(q[1:]), q[0])
        # theta/sin(theta/2) = 4 half/(2 sin(half)), finite at the origin
        return 4 * C3(half) * q[1:]


RotationVector = _RotationVector()


class _EulerXyz(_SO3Base):
    def identity(self) -> ca.SX:
        return ca.SX([0, 0, 0])

    def from_dcm(self, R, eps):
        """
        Extracts (roll, pitch, yaw) from R = Rx(roll) Ry(pitch) Rz(yaw).

        At gimbal lock, pitch = +/- pi/2, roll is set to zero.
        """
        assert R.shape == (3, 3)
        cos_pitch = ca.sqrt(R[0, 0] ** 2 + R[0, 1] ** 2)
        pitch = ca.atan2(R[0, 2], cos_pitch)
        e = ca.vertcat(ca.atan2(-R[1, 2], R[2, 2]), pitch, ca.atan2(-R[0, 1], R[0, 0]))
        e_lock = ca.vertcat(0, pitch, ca.atan2(R[1, 0], R[1, 1]))
        return ca.if_else(cos_pitch < eps, e_lock, e)

    def from_quat(self, q, eps):
        return self.from_dcm(Dcm.from_quat(q), eps)


EulerXyz = _EulerXyz()


class _EulerZyx(_SO3Base):
    def identity(self) -> ca.SX:
        return ca.SX([0, 0, 0])

    def from_dcm(self, R, eps):
        """
        Extracts (yaw, pitch, roll) from R = Rx(roll) Ry(pitch) Rz(yaw), the
        XYZ angles in reverse order.
        """
        e = EulerXyz.from_dcm(R, eps)
        return ca.vertcat(e[2], e[1], e[0])

    def from_quat(self, q, eps):
        return self.from_dcm(Dcm.from_quat(q), eps)


EulerZyx = _EulerZyx()
