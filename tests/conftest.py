"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add backend to Python path for test imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "backend"))

from services.config_manager import CONFIG_DIR_ENV, ConfigManager  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config singleton at a throwaway directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture
def git_repo(tmp_path):
    """A small repository with two commits touching app.py and adding util.py."""
    import git

    repo_dir = tmp_path / "repo"
    repo = git.Repo.init(repo_dir)
    actor = git.Actor("Tour Tester", "tester@example.com")

    app = repo_dir / "app.py"
    app.write_text("import os\n\n\ndef main():\n    return 1\n")
    repo.index.add(["app.py"])
    first = repo.index.commit("Initial commit", author=actor, committer=actor)

    app.write_text("import os\n\n\ndef main():\n    return 2\n")
    (repo_dir / "util.py").write_text("def helper():\n    pass\n")
    repo.index.add(["app.py", "util.py"])
    second = repo.index.commit("Change return value\n\nAnd add a helper.", author=actor, committer=actor)

    return repo_dir, first.hexsha, second.hexsha
