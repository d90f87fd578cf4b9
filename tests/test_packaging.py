"""The device entry point must never be importable as the stdlib `code`."""

import sys
from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parents[1]


def _pyproject():
    with open(ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)


class TestCodePyIsolation:
    def test_root_not_forced_onto_sys_path(self):
        opts = _pyproject()["tool"]["pytest"]["ini_options"]
        assert "pythonpath" not in opts

    def test_pdb_plugin_disabled(self):
        opts = _pyproject()["tool"]["pytest"]["ini_options"]
        assert "-p no:debugging" in opts["addopts"]

    def test_code_not_installed_as_module(self):
        mods = _pyproject()["tool"]["setuptools"]["py-modules"]
        assert "code" not in mods

    def test_loaded_code_module_is_stdlib(self):
        mod = sys.modules.get("code")
        if mod is None:
            pytest.skip("code module not imported in this session")
        assert hasattr(mod, "InteractiveConsole")
