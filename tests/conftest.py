"""
Pytest fixtures for lingest tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def clean_env():
    """Keep the developer's logging settings out of the tests."""
    # Own MonkeyPatch so the shared `monkeypatch` fixture is set up after
    # (and torn down before) `temp_dir` when a test requests both.
    with pytest.MonkeyPatch.context() as mp:
        mp.delenv("LINGEST_DEBUG", raising=False)
        mp.delenv("LINGEST_LOG_FILE", raising=False)
        yield


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_project(temp_dir: Path) -> Path:
    """Create a small mixed project.

    Layout:
        README.md
        setup.cfg
        docs/guide.md
        src/app/__init__.py
        src/app/main.py
        src/app/debug.log
        node_modules/pkg/index.js
    """
    (temp_dir / "README.md").write_text("# Sample\n")
    (temp_dir / "setup.cfg").write_text("[metadata]\nname = sample\n")

    docs = temp_dir / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("Guide\n")

    app = temp_dir / "src" / "app"
    app.mkdir(parents=True)
    (app / "__init__.py").write_text("")
    (app / "main.py").write_text("print('hello')\n")
    (app / "debug.log").write_text("noise\n")

    pkg = temp_dir / "node_modules" / "pkg"
    pkg.mkdir(parents=True)
    (pkg / "index.js").write_text("module.exports = {}\n")

    return temp_dir



@pytest.fixture
def undecodable_project(temp_dir: Path) -> Path:
    """Create ok.txt plus a file whose name is not valid UTF-8.

    Skips where the filesystem refuses such names.
    """
    (temp_dir / "ok.txt").write_text("fine\n")
    try:
        with open(os.path.join(os.fsencode(str(temp_dir)), b"bad\xff.txt"), "wb") as f:
            f.write(b"raw name\n")
    except (OSError, ValueError):
        pytest.skip("filesystem rejects non-UTF-8 file names")
    return temp_dir
