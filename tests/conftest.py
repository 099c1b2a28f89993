"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed xctestrun package.
"""

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def v1_path() -> Path:
    return FIXTURES / "runner_v1.xctestrun"


@pytest.fixture
def v2_path() -> Path:
    return FIXTURES / "fakeapp_v2.xctestrun"


@pytest.fixture
def copy_fixture(tmp_path):
    """Copy a fixture into tmp_path so a test can mutate it."""
    def _copy(name: str) -> Path:
        dest = tmp_path / name
        shutil.copy(FIXTURES / name, dest)
        return dest
    return _copy
