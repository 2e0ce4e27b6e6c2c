"""Small numeric helpers."""

# Machine epsilon of an IEEE 754 single-precision float.
F32_EPSILON = 1.1920929e-07


def nearly_eq(x: float, y: float) -> bool:
    """Return True when ``x`` and ``y`` differ by less than single-precision epsilon."""
    return abs(x - y) < F32_EPSILON


def nearly_zero(x: float) -> bool:
    """Return True when ``x`` is within single-precision epsilon of zero."""
    return nearly_eq(x, 0.0)