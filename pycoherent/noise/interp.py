"""
Interpolation primitives for coherent noise.

Every function is plain arithmetic, so it accepts Python floats as well as
NumPy arrays (broadcasting as usual). The alpha value is expected in [0, 1];
values outside that range extrapolate.
"""


def linear_interp(n0, n1, a):
    """
    Linear interpolation between two values.

    Written as ``(1 - a) * n0 + a * n1`` so that ``a = 0`` returns exactly
    ``n0`` and ``a = 1`` returns exactly ``n1``.

    Args:
        n0: Value at a = 0
        n1: Value at a = 1
        a: Alpha value

    Returns:
        The interpolated value
    """
    return ((1.0 - a) * n0) + (a * n1)


def cubic_interp(n0, n1, n2, n3, a):
    """
    Cubic interpolation between n1 and n2, shaped by the outer values n0 and n3.

    Args:
        n0: Value before n1
        n1: Value at a = 0
        n2: Value at a = 1
        n3: Value after n2
        a: Alpha value

    Returns:
        The interpolated value
    """
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    s = n1
    return p * a * a * a + q * a * a + r * a + s


def s_curve3(a):
    """Cubic S-curve 3a^2 - 2a^3 (first derivative zero at 0 and 1)."""
    return a * a * (3.0 - 2.0 * a)


def s_curve5(a):
    """Quintic S-curve 6a^5 - 15a^4 + 10a^3 (first and second derivatives zero at 0 and 1)."""
    a3 = a * a * a
    a4 = a3 * a
    a5 = a4 * a
    return (6.0 * a5) - (15.0 * a4) + (10.0 * a3)


__all__ = ["linear_interp", "cubic_interp", "s_curve3", "s_curve5"]
