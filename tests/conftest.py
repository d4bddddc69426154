"""Test configuration and fixtures for dirtools."""

import pytest

from dirtools.config import set_root


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def example_dir(tmp_path):
    """Create the example directory used by most walk tests.

    exampleDir/
    ├── .hiddenDir/
    │   ├── hiddenSubDir/
    │   └── hiddenFile
    ├── emptyDir/
    ├── subDir1/
    │   └── file2
    ├── subDir2/
    │   └── subDir3/
    │       └── file3
    └── .hiddenFile
    """
    root = tmp_path / "exampleDir"
    root.mkdir()
    (root / ".hiddenDir" / "hiddenSubDir").mkdir(parents=True)
    (root / "emptyDir").mkdir()
    (root / "subDir1").mkdir()
    (root / "subDir2" / "subDir3").mkdir(parents=True)
    (root / ".hiddenFile").touch()
    (root / ".hiddenDir" / "hiddenFile").write_text("hidden")
    (root / "subDir1" / "file2").write_text("file2")
    (root / "subDir2" / "subDir3" / "file3").write_text("file3")
    return root


@pytest.fixture
def clean_config(monkeypatch):
    """Clear every environment variable and override dirtools reads."""
    for name in ("DIRTOOLS_ROOT", "ROOT", "DIRTOOLS_TMP", "TMP"):
        monkeypatch.delenv(name, raising=False)
    set_root(None)
    yield
    set_root(None)

