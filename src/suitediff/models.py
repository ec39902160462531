# src/suitediff/models.py

"""
Attrs-based data models shared by extraction, decoration and diffing.
"""

from attrs import define, field

FULL_NAME_SEPARATOR = " > "
DYNAMIC_NAME = "<dynamic>"


def _to_tuple(value) -> tuple:
    return tuple(value)


@define(frozen=True, slots=True)
class TestRecord:
    """
    One discovered test case.

    `suite_path` lists the enclosing suite names, outermost first, and
    `suite_skips` holds each of those suites' own declared skip flag.
    `skipped` is already propagated (own flag OR any ancestor flag).
    """

    __test__ = False  # not a pytest class

    name: str
    suite_path: tuple[str, ...] = field(factory=tuple, converter=_to_tuple)
    skipped: bool = field(default=False)
    file: str | None = field(default=None)
    suite_skips: tuple[bool, ...] = field(factory=tuple, converter=_to_tuple)
    line: int | None = field(default=None, eq=False)

    @property
    def full_name(self) -> str:
        return FULL_NAME_SEPARATOR.join((*self.suite_path, self.name))


@define(frozen=True, slots=True)
class SuiteFrame:
    """Traversal state for one active grouping construct."""

    name: str
    skip: bool = False


@define(frozen=True, slots=True)
class Snapshot:
    """The complete test inventory of one revision."""

    tests: tuple[str, ...] = field(factory=tuple, converter=_to_tuple)
    skipped: tuple[str, ...] = field(factory=tuple, converter=_to_tuple)
    files: tuple[str, ...] = field(factory=tuple, converter=_to_tuple)

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()


@define(frozen=True, slots=True)
class DiffResult:
    """
    Multiset comparison of two FullName sequences.

    Each field keeps multiplicity: a name that occurs twice more in the
    current revision than in the baseline appears twice in `added`.
    """

    added: tuple[str, ...] = field(factory=tuple, converter=_to_tuple)
    missing: tuple[str, ...] = field(factory=tuple, converter=_to_tuple)
    common: tuple[str, ...] = field(factory=tuple, converter=_to_tuple)

    @property
    def added_count(self) -> int:
        return len(self.added)

    @property
    def missing_count(self) -> int:
        return len(self.missing)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.missing


# 🧪⚙️
