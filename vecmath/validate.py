"""
Argument guards shared by the vector and quaternion script functions.
"""
import math
import numbers
from collections.abc import Mapping

from .math import Vector3D, Quaternion


class InvalidArgument(TypeError):
    """Raised when a script passes an argument of the wrong shape or kind."""
    def __init__(self, label, message):
        super().__init__(f"{label}: {message}")
        self.label = label


def _is_real(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        float(value)
    except OverflowError:
        return False
    return True


def field(value, name):
    """Read component ``name`` from an object attribute or a mapping key."""
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def is_vector3_duck(value) -> bool:
    """Return True if ``value`` exposes numeric x, y and z."""
    if value is None:
        return False
    return all(_is_real(field(value, name)) for name in ("x", "y", "z"))


def assert_number(value, label):
    if not _is_real(value) or not math.isfinite(value):
        raise InvalidArgument(label, f"expected a finite number, got {value!r}")


def assert_vector3(value, label):
    if not isinstance(value, Vector3D):
        raise InvalidArgument(label, f"expected a Vector3D, got {type(value).__name__}")


def assert_vector3_duck(value, label):
    if value is None:
        raise InvalidArgument(label, "expected a vector with x, y, z, got None")
    for name in ("x", "y", "z"):
        component = field(value, name)
        if not _is_real(component):
            raise InvalidArgument(f"{label}.{name}", f"expected a number, got {component!r}")


def assert_quaternion(value, label):
    if not isinstance(value, Quaternion):
        raise InvalidArgument(label, f"expected a Quaternion, got {type(value).__name__}")
