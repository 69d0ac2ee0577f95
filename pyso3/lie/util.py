import casadi as ca

eps = 1e-7  # to avoid divide by zero

x = ca.SX.sym("x")

# sin(x)/x
C1 = ca.Function(
    "sinc",
    [x],
    [ca.if_else(ca.fabs(x) < eps, 1 - x**2 / 6 + x**4 / 120, ca.sin(x) / x)],
)

# x/(2 sin(x))
C3 = ca.Function(
    "half_inv_sinc",
    [x],
    [
        ca.if_else(
            ca.fabs(x) < eps,
            0.5 + x**2 / 12 + 7 * x**4 / 720,
            x / (2 * ca.sin(x)),
        )
    ],
)

# delete temp variable used to create functions
del x
