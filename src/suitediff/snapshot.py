# src/suitediff/snapshot.py

"""
Builds the test inventory of one revision from a list of test files.
"""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import attrs
import structlog
from attrs import define

from suitediff.decorator import HierarchicalDecorator
from suitediff.exceptions import ParseFailure
from suitediff.extraction.protocols import Extractor
from suitediff.files import relative_path
from suitediff.models import Snapshot, TestRecord
from suitediff.syntax.protocols import SyntaxTreeProvider

log = structlog.get_logger("snapshot")


@define(frozen=True, slots=True)
class RevisionInventory:
    """A revision's snapshot together with the decorator that produced it."""

    snapshot: Snapshot
    decorator: HierarchicalDecorator


class SnapshotAggregator:
    """
    Runs an extractor over every test file of one revision.

    Each `compute` call is independent; one aggregator can serve both sides
    of a comparison as long as the working tree is switched in between.
    """

    def __init__(
        self,
        provider: SyntaxTreeProvider,
        extractor: Extractor,
        root: Path,
        include_file: bool = False,
        workers: int = 1,
    ):
        self.provider = provider
        self.extractor = extractor
        self.root = root
        self.include_file = include_file
        self.workers = workers
        self._log = log.bind(extractor=extractor.name, root=str(root))

    def extract_file(self, file: Path) -> list[TestRecord]:
        """Parses one file and returns its records with the file attached."""
        display_path = relative_path(file, self.root)
        try:
            source = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self._log.error("Could not read test file", file=display_path, error=str(e))
            raise ParseFailure(display_path, "Could not read test file", details=e) from e

        tree = self.provider.parse(source, display_path)
        records = self.extractor.extract(tree)
        return [attrs.evolve(record, file=display_path) for record in records]

    def compute(self, files: Sequence[Path]) -> RevisionInventory:
        """
        Builds the snapshot for `files`, in the given order.

        Raises:
            ParseFailure: any file could not be read or parsed.
        """
        self._log.info("Computing snapshot", files=len(files), workers=self.workers)

        if self.workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                # map() yields in submission order, so scan order is kept.
                per_file = list(pool.map(self.extract_file, files))
        else:
            per_file = [self.extract_file(file) for file in files]

        revision = HierarchicalDecorator(include_file=self.include_file)
        tests: list[str] = []
        skipped: list[str] = []
        file_paths: list[str] = []

        for file, records in zip(files, per_file):
            file_tests = HierarchicalDecorator(records, include_file=self.include_file)
            tests.extend(file_tests.full_names())
            skipped.extend(file_tests.skipped_full_names())
            file_paths.append(relative_path(file, self.root))
            revision.append(records)
            self._log.debug(
                "Tests in file",
                file=file_paths[-1],
                tests=", ".join(file_tests.test_names()),
            )

        snapshot = Snapshot(tests=tests, skipped=skipped, files=file_paths)
        self._log.info(
            "Snapshot complete",
            tests=len(snapshot.tests),
            skipped=len(snapshot.skipped),
            files=len(snapshot.files),
        )
        return RevisionInventory(snapshot=snapshot, decorator=revision)

# 🧪⚙️
