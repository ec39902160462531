# src/suitediff/engines/git/__init__.py

"""
Git engine: switches a working tree between revisions using pygit2.
"""

from .base import DEFAULT_BASELINE, GitRevisionSwitcher
from .exceptions import GitCheckoutError, GitEngineError, GitRestoreError

__all__ = [
    "DEFAULT_BASELINE",
    "GitCheckoutError",
    "GitEngineError",
    "GitRestoreError",
    "GitRevisionSwitcher",
]

# 🧪⚙️
