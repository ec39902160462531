# src/suitediff/report.py

"""
Markdown report describing how the test inventory changed between revisions.
"""

from attrs import define, field

from suitediff.models import DiffResult

# Above this many names a diff section is folded into a <details> block.
MAX_INLINE_NAMES = 20


@define(frozen=True, slots=True)
class ComparisonReport:
    """Everything a renderer needs to describe one comparison."""

    framework: str
    total_tests: int
    total_files: int
    tests_diff: DiffResult
    skipped_diff: DiffResult
    listing: str = field(default="")
    skipped_listing: str = field(default="")
    baseline_revision: str | None = field(default=None)
    baseline_available: bool = field(default=True)

    @property
    def added_count(self) -> int:
        return self.tests_diff.added_count

    @property
    def missing_count(self) -> int:
        return self.tests_diff.missing_count

    def summary_line(self) -> str:
        return f"Added {self.added_count} tests, removed {self.missing_count} tests"


def _name_list(names: tuple[str, ...]) -> str:
    lines = "\n".join(f"* {name}" for name in names)
    if len(names) <= MAX_INLINE_NAMES:
        return lines
    return f"<details>\n<summary>Show {len(names)} tests</summary>\n\n{lines}\n\n</details>"


class MarkdownReport:
    """Accumulates report sections and renders them as one markdown document."""

    def __init__(self) -> None:
        self._sections: list[str] = []

    def write_summary(self, report: ComparisonReport) -> None:
        self._sections.append(
            f"## 🧪 Tests overview\n\n"
            f"Found **{report.total_tests}** {report.framework} tests "
            f"in {report.total_files} files"
        )
        if not report.baseline_available:
            self._sections.append(
                f"> ⚠️ Baseline revision `{report.baseline_revision}` is unavailable, "
                f"all tests are reported as added."
            )

    def write_diff(self, tests_diff: DiffResult) -> None:
        if tests_diff.is_empty:
            self._sections.append("No tests added or removed")
            return
        if tests_diff.added:
            self._sections.append(f"#### ✔️ Added Tests\n\n{_name_list(tests_diff.added)}")
        if tests_diff.missing:
            self._sections.append(f"#### 🗑️ Removed Tests\n\n{_name_list(tests_diff.missing)}")

    def write_skipped_diff(self, skipped_diff: DiffResult) -> None:
        if skipped_diff.added:
            self._sections.append(f"#### ⏸️ Newly Skipped Tests\n\n{_name_list(skipped_diff.added)}")
        if skipped_diff.missing:
            self._sections.append(f"#### ▶️ Unskipped Tests\n\n{_name_list(skipped_diff.missing)}")

    def write_tests(self, listing: str) -> None:
        if not listing:
            return
        self._sections.append(
            f"<details>\n<summary>📑 List all tests</summary>\n\n{listing}\n\n</details>"
        )

    def write_skipped_tests(self, skipped_listing: str) -> None:
        if not skipped_listing:
            return
        self._sections.append(
            f"<details>\n<summary>⏸️ List skipped tests</summary>\n\n{skipped_listing}\n\n</details>"
        )

    def render(self) -> str:
        return "\n\n".join(self._sections) + "\n"

    @classmethod
    def from_report(cls, report: ComparisonReport) -> "MarkdownReport":
        markdown = cls()
        markdown.write_summary(report)
        markdown.write_diff(report.tests_diff)
        markdown.write_skipped_diff(report.skipped_diff)
        markdown.write_tests(report.listing)
        markdown.write_skipped_tests(report.skipped_listing)
        return markdown

# 🧪⚙️
