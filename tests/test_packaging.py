"""
pyproject.toml ships every source directory, even without __init__.py files.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")
setuptools = pytest.importorskip("setuptools")

ROOT = Path(__file__).resolve().parents[1]


def test_source_directories_are_packaged():
    with open(ROOT / "pyproject.toml", "rb") as fh:
        find = tomllib.load(fh)["tool"]["setuptools"]["packages"]["find"]

    assert find["namespaces"] is True
    found = set(setuptools.find_namespace_packages(where=str(ROOT), include=find["include"]))
    assert {"core", "services", "ui", "ui.components", "utils"} <= found
    assert "tests" not in found
