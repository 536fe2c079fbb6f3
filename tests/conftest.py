"""Shared fixtures for building throwaway Python projects on disk."""

from pathlib import Path

import pytest


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def cyclic_project(tmp_path):
    """A flat-layout project with one cycle: pkg.a -> pkg.b -> pkg.a."""
    return write_tree(
        tmp_path / "proj",
        {
            "pyproject.toml": '[project]\nname = "demo"\n',
            "pkg/__init__.py": "",
            "pkg/a.py": "from pkg.b import helper\nimport os\n",
            "pkg/b.py": "import pkg.a\n",
            "pkg/sub/__init__.py": "",
            "pkg/sub/c.py": "import pkg.a\n",
            "notpkg/d.py": "import pkg.a\n",
            ".hidden/__init__.py": "",
            ".hidden/e.py": "import pkg.a\n",
            "setup.py": "from setuptools import setup\n",
        },
    )


@pytest.fixture
def acyclic_project(tmp_path):
    return write_tree(
        tmp_path / "clean",
        {
            "pyproject.toml": '[project]\nname = "clean"\n',
            "pkg/__init__.py": "",
            "pkg/a.py": "import pkg.b\n",
            "pkg/b.py": "import json\n",
        },
    )
