import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import logging

import pytest
import structlog

from suitediff.syntax import TreeSitterProvider

LOGIN_SPEC = """
describe('Login', () => {
  it('succeeds', () => {});
  it.skip('fails on bad password', () => {});
});
"""


def _git(repo_path: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_path, check=True, capture_output=True)


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests configure logging onto streams that close with the runner."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            handler.close()
            root_logger.removeHandler(handler)
    structlog.reset_defaults()


@pytest.fixture
def login_spec() -> str:
    return LOGIN_SPEC


@pytest.fixture
def provider() -> TreeSitterProvider:
    return TreeSitterProvider()


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """An initialized repository with a dummy user and no commits."""
    repo_path = tmp_path / "test_repo"
    if repo_path.exists():
        shutil.rmtree(repo_path)
    repo_path.mkdir()

    try:
        subprocess.run(["git", "--version"], check=True, capture_output=True, text=True)
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        pytest.skip(f"Git is not available or `git --version` failed: {e}")

    _git(repo_path, "init")
    _git(repo_path, "config", "user.name", "Test User")
    _git(repo_path, "config", "user.email", "test@example.com")
    _git(repo_path, "config", "commit.gpgsign", "false")
    return repo_path


@pytest.fixture
def commit_files(temp_git_repo: Path) -> Callable[[dict[str, str | None], str], None]:
    """
    Writes (or deletes, for None values) files in the temp repo and commits them.
    """

    def _commit(files: dict[str, str | None], message: str) -> None:
        for relative, content in files.items():
            target = temp_git_repo / relative
            if content is None:
                target.unlink()
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        _git(temp_git_repo, "add", "-A")
        _git(temp_git_repo, "commit", "-m", message)

    return _commit
