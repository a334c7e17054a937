"""
Scalar helpers: angle unit conversions and clamped linear interpolation.
"""
import math


def deg_to_rad(degrees):
    return degrees * (math.pi / 180)


def rad_to_deg(radians):
    return radians * (180 / math.pi)


def rev_to_rad(revolutions):
    """Convert whole turns to radians."""
    return revolutions * (2 * math.pi)


def rad_to_rev(radians):
    return radians / (2 * math.pi)


def interp(x1, y1, x2, y2, x):
    """
    Linearly interpolate between (x1, y1) and (x2, y2) at x.
    Outside [min(x1, x2), max(x1, x2)] the Y of the nearer point is returned.
    """
    if x1 > x2:
        return interp(x2, y2, x1, y1, x)
    if x < x1:
        return y1
    if x > x2:
        return y2
    # x1 == x2 here divides by zero
    return y1 + (x - x1) / (x2 - x1) * (y2 - y1)
