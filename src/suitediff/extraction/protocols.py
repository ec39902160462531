#
# src/suitediff/extraction/protocols.py
#
"""
Defines the contract shared by all framework extractors.
"""
from typing import Protocol, runtime_checkable

from suitediff.models import TestRecord
from suitediff.syntax.protocols import SyntaxTree


@runtime_checkable
class Extractor(Protocol):
    """
    Protocol for a framework-aware extractor of test declarations.
    """
    name: str

    def extract(self, tree: SyntaxTree) -> list[TestRecord]:
        """
        Finds the suites and tests declared in one parsed file.

        Args:
            tree: The parsed source file.

        Returns:
            TestRecords in declaration order, without a file attached.
        """
        ...

# 🧪⚙️
