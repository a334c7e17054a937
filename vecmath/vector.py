"""
Vector script functions.

Every function accepts any value exposing numeric ``x``, ``y`` and ``z``
(a Vector3D, an object with those attributes, or a mapping with those keys)
and returns a new Vector3D. Inputs are never modified.
"""
import numbers

import numpy as np

from .math import Vector3D
from .validate import InvalidArgument, assert_number, assert_vector3_duck, field

# Default tolerance for vec3_equal
EPSILON = 1e-4


class _Undefined:
    def __repr__(self):
        return "undefined"


_MISSING = _Undefined()


def _coerce(value, label):
    assert_vector3_duck(value, label)
    return Vector3D(field(value, "x"), field(value, "y"), field(value, "z"))


def _format_component(c, digits=None):
    if digits is not None:
        return f"{c:.{digits}f}"
    if c.is_integer() and abs(c) < 1e16:
        return str(int(c))
    return repr(c)


# --- construction -----------------------------------------------------------

def vec3(x, y, z) -> Vector3D:
    """Build a vector from three numbers."""
    assert_number(x, "x")
    assert_number(y, "y")
    assert_number(z, "z")
    return Vector3D(x, y, z)


def vec3_from(obj) -> Vector3D:
    """Build a vector from any record with numeric x, y and z."""
    assert_vector3_duck(obj, "obj")
    for name in ("x", "y", "z"):
        assert_number(field(obj, name), f"obj.{name}")
    return Vector3D(field(obj, "x"), field(obj, "y"), field(obj, "z"))


def vec3_zero() -> Vector3D:
    return Vector3D(0, 0, 0)


def vec3_one() -> Vector3D:
    return Vector3D(1, 1, 1)


def vec3_unit_x(scale=1) -> Vector3D:
    assert_number(scale, "scale")
    return Vector3D(scale, 0, 0)


def vec3_unit_y(scale=1) -> Vector3D:
    assert_number(scale, "scale")
    return Vector3D(0, scale, 0)


def vec3_unit_z(scale=1) -> Vector3D:
    assert_number(scale, "scale")
    return Vector3D(0, 0, scale)


# --- arithmetic -------------------------------------------------------------

def vec3_add(a, b) -> Vector3D:
    return _coerce(a, "a") + _coerce(b, "b")


def vec3_sub(a, b) -> Vector3D:
    return _coerce(a, "a") - _coerce(b, "b")


def vec3_add_x(v, dx) -> Vector3D:
    v = _coerce(v, "v")
    assert_number(dx, "dx")
    return Vector3D(v.x + dx, v.y, v.z)


def vec3_add_y(v, dy) -> Vector3D:
    v = _coerce(v, "v")
    assert_number(dy, "dy")
    return Vector3D(v.x, v.y + dy, v.z)


def vec3_add_z(v, dz) -> Vector3D:
    v = _coerce(v, "v")
    assert_number(dz, "dz")
    return Vector3D(v.x, v.y, v.z + dz)


def vec3_with_x(v, x) -> Vector3D:
    v = _coerce(v, "v")
    assert_number(x, "x")
    return Vector3D(x, v.y, v.z)


def vec3_with_y(v, y) -> Vector3D:
    v = _coerce(v, "v")
    assert_number(y, "y")
    return Vector3D(v.x, y, v.z)


def vec3_with_z(v, z) -> Vector3D:
    v = _coerce(v, "v")
    assert_number(z, "z")
    return Vector3D(v.x, v.y, z)


def vec3_scale(v, s) -> Vector3D:
    v = _coerce(v, "v")
    assert_number(s, "s")
    return v * s


def vec3_scale_add(v1, s, v2) -> Vector3D:
    """Return ``v1 + s * v2``."""
    v1 = _coerce(v1, "v1")
    assert_number(s, "s")
    v2 = _coerce(v2, "v2")
    return v1 + v2 * s


def vec3_neg(v) -> Vector3D:
    return -_coerce(v, "v")


# --- geometry ---------------------------------------------------------------

def vec3_length_sq(v) -> float:
    """Squared length; cheaper than vec3_length and fine for comparisons."""
    v = _coerce(v, "v")
    return v.dot(v)


def vec3_length(v) -> float:
    return _coerce(v, "v").magnitude()


def vec3_normalized(v) -> Vector3D:
    """
    Return v scaled to unit length.

    A zero (or near-zero) vector yields NaN components rather than an error;
    check the length first when that can happen.
    """
    v = _coerce(v, "v")
    with np.errstate(divide='ignore', invalid='ignore'):
        return v * (np.float64(1.0) / v.magnitude())


def vec3_rescale(v, length) -> Vector3D:
    """Return v pointing the same way with the given length. Same zero-vector caveat as vec3_normalized."""
    assert_number(length, "length")
    return vec3_normalized(v) * length


def vec3_dot(a, b) -> float:
    return _coerce(a, "a").dot(_coerce(b, "b"))


def vec3_cross(a, b) -> Vector3D:
    return _coerce(a, "a").cross(_coerce(b, "b"))


# --- comparison and formatting ----------------------------------------------

def vec3_equal(a, b, epsilon=EPSILON) -> bool:
    """True when every component of a and b differs by at most epsilon."""
    a = _coerce(a, "a")
    b = _coerce(b, "b")
    assert_number(epsilon, "epsilon")
    return bool(np.all(np.abs(a.v - b.v) <= epsilon))


def vec3_to_string(v=_MISSING, digits=None) -> str:
    """
    Render a vector as ``"(x, y, z)"``.

    With ``digits`` each component is printed with that many decimals.
    No argument gives ``"(undefined)"`` and None gives ``"(null)"``.
    """
    if v is _MISSING:
        return "(undefined)"
    if v is None:
        return "(null)"
    v = _coerce(v, "v")
    if digits is not None:
        if isinstance(digits, bool) or not isinstance(digits, numbers.Integral) or digits < 0:
            raise InvalidArgument("digits", f"expected a non-negative integer, got {digits!r}")
        digits = int(digits)
    return "(" + ", ".join(_format_component(c, digits) for c in (v.x, v.y, v.z)) + ")"
