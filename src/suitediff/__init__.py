#
# src/suitediff/__init__.py
#
"""
suitediff: inventory JavaScript test suites and compare them between revisions.
"""
from .decorator import HierarchicalDecorator, SuiteNode
from .differ import compare_snapshots, diff
from .exceptions import (
    BaselineUnavailable,
    ConfigurationError,
    ParseFailure,
    SuitediffError,
    UnresolvableLiteral,
)
from .models import DYNAMIC_NAME, FULL_NAME_SEPARATOR, DiffResult, Snapshot, SuiteFrame, TestRecord
from .snapshot import RevisionInventory, SnapshotAggregator

__all__ = [
    "DYNAMIC_NAME",
    "FULL_NAME_SEPARATOR",
    "BaselineUnavailable",
    "ConfigurationError",
    "DiffResult",
    "HierarchicalDecorator",
    "ParseFailure",
    "RevisionInventory",
    "Snapshot",
    "SnapshotAggregator",
    "SuiteFrame",
    "SuiteNode",
    "SuitediffError",
    "TestRecord",
    "UnresolvableLiteral",
    "compare_snapshots",
    "diff",
]

# 🧪⚙️
