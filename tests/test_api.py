"""Script namespace registration, editor signatures and configuration loading."""

import json
import logging

import pytest

from vecmath import api, vector, rotation, scalar
from vecmath.api import SCRIPT_FUNCTIONS, register, signatures
from vecmath.config import DEFAULT_CONFIG, load_config


def test_script_table_points_at_library_functions():
    assert SCRIPT_FUNCTIONS['vec3add'] is vector.vec3_add
    assert SCRIPT_FUNCTIONS['vec3scaleAdd'] is vector.vec3_scale_add
    assert SCRIPT_FUNCTIONS['quatApply'] is rotation.quat_apply
    assert SCRIPT_FUNCTIONS['interp'] is scalar.interp
    assert all(callable(func) for func in SCRIPT_FUNCTIONS.values())


def test_register_installs_every_function():
    ns = {}
    names = register(ns)
    assert names == list(SCRIPT_FUNCTIONS)
    assert set(ns) == set(SCRIPT_FUNCTIONS)
    v = ns['vec3add']({"x": 1, "y": 2, "z": 3}, ns['vec3one']())
    assert ns['vec3toString'](v) == "(2, 3, 4)"


def test_register_with_prefix():
    ns = {}
    register(ns, {"prefix": "m_"})
    assert "m_vec3" in ns
    assert "vec3" not in ns


def test_register_refuses_collisions():
    ns = {"vec3": "user value"}
    with pytest.raises(KeyError):
        register(ns)
    assert ns == {"vec3": "user value"}

    register(ns, {"overwrite": True})
    assert ns["vec3"] is vector.vec3


def test_register_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger=api.__name__):
        register({})
    assert f"Registered {len(SCRIPT_FUNCTIONS)} script functions" in caplog.text


def test_signatures_for_completion():
    sigs = signatures()
    assert set(sigs) == set(SCRIPT_FUNCTIONS)
    call, summary = sigs['vec3scaleAdd']
    assert call.startswith("vec3scaleAdd(v1, s, v2)")
    assert summary == "Return ``v1 + s * v2``."
    assert "v=undefined" in sigs['vec3toString'][0]
    assert sigs['interp'][0].startswith("interp(x1, y1, x2, y2, x)")


def test_load_config_missing_file(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) == DEFAULT_CONFIG


def test_load_config_merges_over_defaults(tmp_path):
    path = tmp_path / "vecmath.json"
    path.write_text(json.dumps({"prefix": "m_", "extra": 1}))
    config = load_config(str(path))
    assert config["prefix"] == "m_"
    assert config["overwrite"] is False
    assert config["extra"] == 1


@pytest.mark.parametrize("text", ["{not json", "[1, 2, 3]"])
def test_load_config_ignores_bad_files(tmp_path, text):
    path = tmp_path / "vecmath.json"
    path.write_text(text)
    assert load_config(str(path)) == DEFAULT_CONFIG


def test_load_config_unreadable_path(tmp_path):
    assert load_config(str(tmp_path)) == DEFAULT_CONFIG

    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"prefix": "\xff"}')
    assert load_config(str(path)) == DEFAULT_CONFIG
