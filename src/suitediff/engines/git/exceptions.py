# src/suitediff/engines/git/exceptions.py

"""
Custom exceptions specific to the Git engine for suitediff.
"""

from suitediff.exceptions import SuitediffError


class GitEngineError(SuitediffError):
    """Base class for Git engine specific errors."""

    def __init__(
        self,
        message: str,
        repo_path: str | None = None,
        details: Exception | None = None,
    ):
        self.repo_path = repo_path
        self.details = details
        full_message = f"[GitEngine] {message}"
        if repo_path:
            full_message += f" (Repo: '{repo_path}')"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class GitCheckoutError(GitEngineError):
    """Raised when the baseline exists but the working tree cannot be switched to it."""

    pass


class GitRestoreError(GitEngineError):
    """Raised when the original HEAD cannot be checked out again."""

    pass


# 🧪⚙️
