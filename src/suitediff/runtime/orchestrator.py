# src/suitediff/runtime/orchestrator.py

"""
High-level coordinator for the compare process.
Builds the current inventory, switches to the baseline, builds it again and diffs.
"""

import structlog

from suitediff.config.models import CompareConfig
from suitediff.differ import compare_snapshots
from suitediff.engines.git import GitRevisionSwitcher
from suitediff.exceptions import BaselineUnavailable
from suitediff.extraction import get_extractor
from suitediff.files import enumerate_files
from suitediff.models import Snapshot
from suitediff.report import ComparisonReport
from suitediff.snapshot import RevisionInventory, SnapshotAggregator
from suitediff.syntax import SyntaxTreeProvider, TreeSitterProvider
from suitediff.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runtime.orchestrator")


class CompareOrchestrator:
    """Instantiates and coordinates the components of one comparison."""

    def __init__(
        self,
        config: CompareConfig,
        provider: SyntaxTreeProvider | None = None,
        switcher: GitRevisionSwitcher | None = None,
    ):
        self.config = config
        self.provider = provider or TreeSitterProvider()
        self.switcher = switcher or GitRevisionSwitcher(config.root)
        self.extractor = get_extractor(config.framework)
        self.aggregator = SnapshotAggregator(
            provider=self.provider,
            extractor=self.extractor,
            root=config.root,
            include_file=config.include_file,
            workers=config.workers,
        )

    def inventory(self) -> RevisionInventory:
        """Inventory of the working tree as it is right now."""
        files = enumerate_files(self.config.tests, self.config.root)
        if not files:
            log.warning("No test files matched the pattern", pattern=self.config.tests)
        return self.aggregator.compute(files)

    def baseline_snapshot(self) -> Snapshot | None:
        """
        Snapshot of the baseline revision, or None when it cannot be checked out.

        A ParseFailure in the baseline still propagates; only an unreachable
        revision is treated as an empty baseline.
        """
        try:
            with self.switcher.checked_out(self.config.baseline) as commit:
                log.info("Computing baseline snapshot", revision=self.config.baseline, commit=commit[:7])
                return self.inventory().snapshot
        except BaselineUnavailable as e:
            log.warning(
                "Baseline revision unavailable, treating baseline as empty",
                revision=self.config.baseline,
                error=str(e),
            )
            return None

    def run(self) -> ComparisonReport:
        log.info(
            "Comparison starting",
            framework=self.config.framework,
            tests=self.config.tests,
            baseline=self.config.baseline,
        )
        current = self.inventory()
        baseline = self.baseline_snapshot()

        tests_diff, skipped_diff = compare_snapshots(baseline or Snapshot.empty(), current.snapshot)
        report = ComparisonReport(
            framework=self.config.framework,
            total_tests=len(current.snapshot.tests),
            total_files=len(current.snapshot.files),
            tests_diff=tests_diff,
            skipped_diff=skipped_diff,
            listing=current.decorator.render_listing(self.config.suite_list_threshold),
            skipped_listing="\n".join(f"* {name}" for name in current.snapshot.skipped),
            baseline_revision=self.config.baseline,
            baseline_available=baseline is not None,
        )
        log.info(report.summary_line(), total=report.total_tests)
        return report

# 🧪⚙️
