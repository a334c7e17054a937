"""
Script-facing names for the vector, quaternion and scalar functions, and
helpers for installing them into a host's script namespace.
"""
import inspect
import logging

from . import vector, rotation, scalar
from .config import DEFAULT_CONFIG
from .logger import get_logger

log = get_logger(__name__)

SCRIPT_FUNCTIONS = {
    # construction
    'vec3': vector.vec3,
    'vec3from': vector.vec3_from,
    'vec3zero': vector.vec3_zero,
    'vec3one': vector.vec3_one,
    'vec3unitX': vector.vec3_unit_x,
    'vec3unitY': vector.vec3_unit_y,
    'vec3unitZ': vector.vec3_unit_z,
    # arithmetic
    'vec3add': vector.vec3_add,
    'vec3sub': vector.vec3_sub,
    'vec3addX': vector.vec3_add_x,
    'vec3addY': vector.vec3_add_y,
    'vec3addZ': vector.vec3_add_z,
    'vec3withX': vector.vec3_with_x,
    'vec3withY': vector.vec3_with_y,
    'vec3withZ': vector.vec3_with_z,
    'vec3scale': vector.vec3_scale,
    'vec3scaleAdd': vector.vec3_scale_add,
    'vec3neg': vector.vec3_neg,
    # geometry
    'vec3lengthSq': vector.vec3_length_sq,
    'vec3length': vector.vec3_length,
    'vec3normalized': vector.vec3_normalized,
    'vec3rescale': vector.vec3_rescale,
    'vec3dot': vector.vec3_dot,
    'vec3cross': vector.vec3_cross,
    'vec3equal': vector.vec3_equal,
    'vec3toString': vector.vec3_to_string,
    # rotations
    'quatIdent': rotation.quat_ident,
    'quatAxisAngle': rotation.quat_axis_angle,
    'quatApply': rotation.quat_apply,
    # scalars
    'degToRad': scalar.deg_to_rad,
    'radToDeg': scalar.rad_to_deg,
    'revToRad': scalar.rev_to_rad,
    'radToRev': scalar.rad_to_rev,
    'interp': scalar.interp,
}


def register(namespace, config=None):
    """
    Install every script function into ``namespace`` (e.g. a sandbox's globals).

    Names are prefixed with ``config['prefix']``. A name already present in the
    namespace raises KeyError unless ``config['overwrite']`` is set.
    Returns the list of installed names.
    """
    cfg = dict(DEFAULT_CONFIG)
    if config:
        cfg.update(config)
    log.setLevel(getattr(logging, str(cfg["log_level"]).upper(), logging.INFO))

    names = {cfg["prefix"] + name: func for name, func in SCRIPT_FUNCTIONS.items()}
    if not cfg["overwrite"]:
        taken = [name for name in names if name in namespace]
        if taken:
            raise KeyError(f"Script names already defined: {', '.join(taken)}")

    for name, func in names.items():
        namespace[name] = func
        log.debug(f"Registered {name} -> {func.__module__}.{func.__name__}")
    log.info(f"Registered {len(names)} script functions")
    return list(names)


def signatures():
    """Script name -> (call signature, one-line summary), for editor completion."""
    result = {}
    for name, func in SCRIPT_FUNCTIONS.items():
        doc = inspect.getdoc(func) or ""
        summary = doc.splitlines()[0] if doc else ""
        result[name] = (f"{name}{inspect.signature(func)}", summary)
    return result
