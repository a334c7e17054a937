# vecmath/__init__.py

from .math import Vector3D, Quaternion
from .validate import (
    InvalidArgument,
    assert_number, assert_vector3, assert_vector3_duck, assert_quaternion,
    is_vector3_duck,
)
from .scalar import deg_to_rad, rad_to_deg, rev_to_rad, rad_to_rev, interp
from .vector import (
    EPSILON,
    vec3, vec3_from, vec3_zero, vec3_one, vec3_unit_x, vec3_unit_y, vec3_unit_z,
    vec3_add, vec3_sub, vec3_add_x, vec3_add_y, vec3_add_z,
    vec3_with_x, vec3_with_y, vec3_with_z,
    vec3_scale, vec3_scale_add, vec3_neg,
    vec3_length_sq, vec3_length, vec3_normalized, vec3_rescale,
    vec3_dot, vec3_cross, vec3_equal, vec3_to_string,
)
from .rotation import quat_ident, quat_axis_angle, quat_apply
from .api import SCRIPT_FUNCTIONS, register, signatures
from .config import load_config, DEFAULT_CONFIG

__all__ = [
    'Vector3D', 'Quaternion',
    'InvalidArgument',
    'assert_number', 'assert_vector3', 'assert_vector3_duck', 'assert_quaternion',
    'is_vector3_duck',
    'deg_to_rad', 'rad_to_deg', 'rev_to_rad', 'rad_to_rev', 'interp',
    'EPSILON',
    'vec3', 'vec3_from', 'vec3_zero', 'vec3_one', 'vec3_unit_x', 'vec3_unit_y', 'vec3_unit_z',
    'vec3_add', 'vec3_sub', 'vec3_add_x', 'vec3_add_y', 'vec3_add_z',
    'vec3_with_x', 'vec3_with_y', 'vec3_with_z',
    'vec3_scale', 'vec3_scale_add', 'vec3_neg',
    'vec3_length_sq', 'vec3_length', 'vec3_normalized', 'vec3_rescale',
    'vec3_dot', 'vec3_cross', 'vec3_equal', 'vec3_to_string',
    'quat_ident', 'quat_axis_angle', 'quat_apply',
    'SCRIPT_FUNCTIONS', 'register', 'signatures',
    'load_config', 'DEFAULT_CONFIG',
]
