# src/suitediff/differ.py

"""
Multiset comparison of two test inventories.
"""

from collections import Counter
from collections.abc import Sequence

import structlog

from suitediff.models import DiffResult, Snapshot

log = structlog.get_logger("differ")


def diff(baseline: Sequence[str], current: Sequence[str]) -> DiffResult:
    """
    Compares two FullName sequences as multisets.

    A name declared twice in the baseline and once in the current revision
    is reported once in `missing` and once in `common`.

    Args:
        baseline: Full names from the older revision.
        current: Full names from the newer revision.

    Returns:
        DiffResult whose fields follow the first-occurrence order of the inputs.
    """
    base_counts = Counter(baseline)
    current_counts = Counter(current)

    result = DiffResult(
        added=(current_counts - base_counts).elements(),
        missing=(base_counts - current_counts).elements(),
        common=(base_counts & current_counts).elements(),
    )
    log.debug(
        "Computed inventory diff",
        added=result.added_count,
        missing=result.missing_count,
        common=len(result.common),
    )
    return result


def compare_snapshots(baseline: Snapshot, current: Snapshot) -> tuple[DiffResult, DiffResult]:
    """Returns (tests diff, skipped-tests diff) for two snapshots."""
    return diff(baseline.tests, current.tests), diff(baseline.skipped, current.skipped)

# 🧪⚙️
