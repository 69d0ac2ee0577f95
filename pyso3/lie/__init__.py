"""
Symbolic SO(3) primitives built with casadi.

util: coefficient functions with taylor series near the origin
so3: closed form products and conversions for each parameterization
functions: the closed forms compiled to casadi Functions for numeric evaluation
"""
