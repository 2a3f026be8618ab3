"""Shared fixtures; also puts the repo root on sys.path so `fakestore` imports."""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    # Insert repo root (one level up from tests/) to sys.path
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture(params=["filesystem", "memory"])
def storage(request, tmp_path):
    """A fresh backend of each kind, for tests of the shared contract."""
    from fakestore_lib.storage import create_storage
    return create_storage(backend=request.param, root_dir=tmp_path / "root")
