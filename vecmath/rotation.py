"""
Quaternion script functions.

Only Quaternion and Vector3D instances are accepted here; plain records with
x/y/z fields are rejected.
"""
from .math import Vector3D, Quaternion
from .validate import assert_number, assert_vector3, assert_quaternion


def quat_ident() -> Quaternion:
    """The zero-angle rotation."""
    return Quaternion()


def quat_axis_angle(axis: Vector3D, angle) -> Quaternion:
    """
    Rotation of ``angle`` radians about ``axis`` (right-handed).
    The axis does not need to be unit length.
    """
    assert_vector3(axis, "axis")
    assert_number(angle, "angle")
    return Quaternion.from_axis_angle(axis.v, angle)


def quat_apply(q: Quaternion, v: Vector3D) -> Vector3D:
    """Return ``v`` rotated by ``q``. ``v`` itself is left untouched."""
    assert_quaternion(q, "q")
    assert_vector3(v, "v")
    # apply_rotation works in place, so rotate a copy
    rotated = v.clone()
    rotated.apply_rotation(q)
    return rotated
