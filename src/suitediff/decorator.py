# src/suitediff/decorator.py

"""
Builds a suite tree from flat TestRecords and renders views of it.
"""

from collections.abc import Iterable, Iterator

import structlog
from attrs import define, field

from suitediff.models import FULL_NAME_SEPARATOR, TestRecord

log = structlog.get_logger("decorator")

SUITE_MARKER = "📎"
MARKDOWN_INDENT = "  "


@define(slots=True)
class SuiteNode:
    """
    One suite in the tree. The root node stands for "no suite".

    `skip` is the suite's effective state: its own declaration OR its parent's.
    Children are keyed by (name, declared skip) so a disabled and an enabled
    suite of the same name stay apart.
    """

    name: str
    skip: bool = field(default=False)
    children: dict[tuple[str, bool], "SuiteNode"] = field(factory=dict, repr=False)
    tests: list[TestRecord] = field(factory=list, repr=False)

    def child(self, name: str, declared_skip: bool) -> "SuiteNode":
        key = (name, declared_skip)
        node = self.children.get(key)
        if node is None:
            node = SuiteNode(name=name, skip=self.skip or declared_skip)
            self.children[key] = node
        return node


def _strike(text: str, skipped: bool) -> str:
    return f"~~{text}~~" if skipped else text


class HierarchicalDecorator:
    """
    Queryable view over the tests of one or more files.

    Records can be appended in any granularity (all at once or per file); the
    resulting set of full names is the same. Within a suite, its own tests come
    before its nested suites, matching the order the runners execute them in.
    """

    def __init__(self, records: Iterable[TestRecord] = (), include_file: bool = False):
        self.include_file = include_file
        self._root = SuiteNode(name="")
        self._count = 0
        self.append(records)

    @property
    def root(self) -> SuiteNode:
        return self._root

    def append(self, records: Iterable[TestRecord]) -> None:
        """Inserts each record under its suite path, creating suites as needed."""
        for record in records:
            node = self._root
            if self.include_file and record.file:
                node = node.child(record.file, False)
            skips = record.suite_skips
            for index, suite_name in enumerate(record.suite_path):
                declared = skips[index] if index < len(skips) else False
                node = node.child(suite_name, declared)
            node.tests.append(record)
            self._count += 1

    def _leaves(self) -> Iterator[tuple[tuple[str, ...], TestRecord, bool]]:
        """Yields (suite path, record, effective skip) depth-first."""
        pending: list[tuple[tuple[str, ...], SuiteNode]] = [((), self._root)]
        while pending:
            path, node = pending.pop()
            for record in node.tests:
                yield path, record, record.skipped or node.skip
            pending.extend(
                reversed([((*path, child.name), child) for child in node.children.values()])
            )

    def _suites(self) -> Iterator[tuple[int, SuiteNode]]:
        """Yields (depth, suite) depth-first, excluding the root."""
        pending = [(0, child) for child in reversed(self._root.children.values())]
        while pending:
            depth, node = pending.pop()
            yield depth, node
            pending.extend((depth + 1, child) for child in reversed(node.children.values()))

    def full_names(self) -> list[str]:
        return [FULL_NAME_SEPARATOR.join((*path, record.name)) for path, record, _ in self._leaves()]

    def skipped_full_names(self) -> list[str]:
        return [
            FULL_NAME_SEPARATOR.join((*path, record.name))
            for path, record, skipped in self._leaves()
            if skipped
        ]

    def test_names(self) -> list[str]:
        return [record.name for _, record, _ in self._leaves()]

    def count(self) -> int:
        return self._count

    def render_nested_list(self) -> str:
        """
        Renders the tree as a nested markdown list.

        Suites are bold and prefixed with a marker; skipped suites and tests
        are struck through.
        """
        lines: list[str] = []
        pending: list[tuple[int, SuiteNode]] = [(0, self._root)]
        while pending:
            depth, node = pending.pop()
            if node is not self._root:
                lines.append(
                    f"{MARKDOWN_INDENT * depth}* {SUITE_MARKER} {_strike(f'**{node.name}**', node.skip)}"
                )
                depth += 1
            indent = MARKDOWN_INDENT * depth
            for record in node.tests:
                lines.append(f"{indent}* {_strike(record.name, record.skipped or node.skip)}")
            pending.extend((depth, child) for child in reversed(node.children.values()))
        return "\n".join(lines)

    def render_suite_list(self) -> list[str]:
        """Suite names in tree order, each listed once."""
        return list(dict.fromkeys(node.name for _, node in self._suites()))

    def render_listing(self, threshold: int) -> str:
        """
        Nested listing, or a suite-only listing once the tree holds more than
        `threshold` tests.
        """
        if self._count <= threshold:
            return self.render_nested_list()
        log.debug("Too many tests for a full listing, listing suites only", count=self._count, threshold=threshold)
        return "\n".join(f"* {SUITE_MARKER} {name}" for name in self.render_suite_list())

# 🧪⚙️
