"""Shared fixtures for building header trees on disk."""

from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Return a function that writes {relative_path: content} under tmp_path."""

    def _make_tree(files: Dict[str, str]) -> Path:
        for relative, content in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path.resolve()

    return _make_tree
