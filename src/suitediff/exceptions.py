# src/suitediff/exceptions.py

"""
Custom exceptions for suitediff.
"""


class SuitediffError(Exception):
    """Base class for all suitediff errors."""

    pass


class ConfigurationError(SuitediffError):
    """Raised for missing or invalid configuration values."""

    pass


class ParseFailure(SuitediffError):
    """Raised when a test file cannot be turned into a syntax tree."""

    def __init__(
        self,
        file_path: str,
        message: str = "Could not parse test file",
        details: Exception | None = None,
    ):
        self.file_path = file_path
        self.details = details
        super().__init__(f"{message}: '{file_path}'")
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class UnresolvableLiteral(SuitediffError):
    """A suite or test name argument is not a static string."""

    def __init__(self, node_type: str, line: int | None = None):
        self.node_type = node_type
        self.line = line
        location = f" at line {line}" if line else ""
        super().__init__(f"Name argument is not a static literal ({node_type}){location}")


class BaselineUnavailable(SuitediffError):
    """Raised when the baseline revision cannot be checked out."""

    def __init__(
        self,
        revision: str,
        repo_path: str | None = None,
        details: Exception | None = None,
    ):
        self.revision = revision
        self.repo_path = repo_path
        self.details = details
        full_message = f"[Baseline] Revision '{revision}' is unavailable"
        if repo_path:
            full_message += f" (Repo: '{repo_path}')"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


# 🧪⚙️
