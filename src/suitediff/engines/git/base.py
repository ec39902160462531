# src/suitediff/engines/git/base.py

"""
Revision switching for the baseline inventory, implemented with pygit2.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import pygit2
import structlog

from suitediff.engines.git.exceptions import GitCheckoutError, GitEngineError, GitRestoreError
from suitediff.exceptions import BaselineUnavailable

log = structlog.get_logger("engines.git.base")

DEFAULT_BASELINE = "HEAD^"


class GitRevisionSwitcher:
    """Checks out a baseline revision and puts the original HEAD back afterwards."""

    def __init__(self, working_dir: Path) -> None:
        self.working_dir = working_dir
        self._log = log.bind(engine_id=id(self), path=str(working_dir))
        self._log.debug("GitRevisionSwitcher initialized")

    def _get_repo(self) -> pygit2.Repository:
        """Helper to get the pygit2 Repository object."""
        try:
            repo_path = pygit2.discover_repository(str(self.working_dir))
            if not repo_path:
                raise pygit2.GitError(
                    f"Not a Git repository (or any of the parent directories): {self.working_dir}"
                )
            return pygit2.Repository(repo_path)
        except pygit2.GitError as e:
            self._log.error("Failed to open Git repository", error=str(e))
            raise GitEngineError("Failed to open repository", str(self.working_dir), e) from e

    def resolve(self, revision: str) -> str:
        """Full commit hash for a revision expression such as 'HEAD^' or 'main'."""
        repo = self._get_repo()
        return str(self._resolve_commit(repo, revision).id)

    def _resolve_commit(self, repo: pygit2.Repository, revision: str) -> pygit2.Commit:
        try:
            return repo.revparse_single(revision).peel(pygit2.Commit)
        except (KeyError, ValueError, pygit2.GitError) as e:
            self._log.warning("Baseline revision cannot be resolved", revision=revision, error=str(e))
            raise BaselineUnavailable(revision, str(self.working_dir), e) from e

    @contextmanager
    def checked_out(self, revision: str = DEFAULT_BASELINE) -> Iterator[str]:
        """
        Context manager that leaves the working tree at `revision` while active.

        The checkout is safe: local modifications that would be overwritten
        make it fail instead of being discarded.

        Yields:
            The hash of the checked out commit.

        Raises:
            BaselineUnavailable: no repository, an unborn HEAD or an unresolvable revision.
            GitCheckoutError: the working tree cannot be switched, e.g. local changes conflict.
            GitRestoreError: the original HEAD could not be restored.
        """
        try:
            repo = self._get_repo()
        except GitEngineError as e:
            raise BaselineUnavailable(revision, str(self.working_dir), e) from e

        if repo.head_is_unborn:
            raise BaselineUnavailable(revision, str(self.working_dir))

        original_detached = repo.head_is_detached
        original_ref = repo.head.name
        original_commit = repo.head.peel(pygit2.Commit)
        target = self._resolve_commit(repo, revision)

        switch_log = self._log.bind(
            revision=revision,
            target=str(target.id)[:7],
            original=original_ref if not original_detached else str(original_commit.id)[:7],
        )
        try:
            repo.checkout_tree(target)
            repo.set_head(target.id)
        except pygit2.GitError as e:
            switch_log.error("Failed to check out baseline revision", error=str(e))
            raise GitCheckoutError(
                f"Could not check out '{revision}'; commit or stash local changes first",
                str(self.working_dir),
                e,
            ) from e

        switch_log.info("Checked out baseline revision")
        try:
            yield str(target.id)
        finally:
            try:
                if original_detached:
                    repo.checkout_tree(original_commit)
                    repo.set_head(original_commit.id)
                else:
                    repo.checkout(original_ref)
            except pygit2.GitError as e:
                switch_log.critical("Failed to restore original HEAD", error=str(e))
                raise GitRestoreError(
                    f"Could not restore '{original_ref}'", str(self.working_dir), e
                ) from e
            switch_log.info("Restored original HEAD")

# 🧪⚙️
