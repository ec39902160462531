# src/suitediff/extraction/frameworks.py

"""
Framework extractors: map each authoring style's declarations onto roles.
"""

import structlog

from suitediff.extraction.visitor import BlockVisitor, Role, RoleMatch
from suitediff.models import TestRecord
from suitediff.syntax.protocols import Callee, SyntaxTree

log = structlog.get_logger("extraction.frameworks")

SKIP_QUALIFIER = "skip"
ONLY_QUALIFIER = "only"


def _skip_state(callee: Callee) -> bool | None:
    """
    True for `.skip`, False for no qualifier or `.only`.

    None means the callee carries some other qualifier (`it.each`, `describe.parallel`)
    and does not declare anything by itself.
    """
    if not callee.qualifiers:
        return False
    if len(callee.qualifiers) == 1 and callee.qualifiers[0] in (SKIP_QUALIFIER, ONLY_QUALIFIER):
        return callee.qualifiers[0] == SKIP_QUALIFIER
    return None


class BlockStyleExtractor(BlockVisitor):
    """Extractor for mocha, cypress, jest and jasmine style specs."""

    name = "block"
    suite_names = frozenset({"describe", "context", "suite"})
    test_names = frozenset({"it", "test", "specify"})

    def match(self, callee: Callee) -> RoleMatch | None:
        name = callee.name
        skip = _skip_state(callee)
        if skip is None:
            return None

        # xdescribe / xit are always disabled.
        if name.startswith("x") and not callee.qualifiers:
            base = name[1:]
            if base in self.suite_names:
                return RoleMatch(Role.SUITE, skip=True)
            if base in self.test_names:
                return RoleMatch(Role.TEST, skip=True)
            return None

        if name in self.suite_names:
            return RoleMatch(Role.SUITE, skip=skip)
        if name in self.test_names:
            return RoleMatch(Role.TEST, skip=skip)
        return None

    def extract(self, tree: SyntaxTree) -> list[TestRecord]:
        records = self.visit(tree.root)
        log.debug("Extracted block-style tests", file=tree.path, count=len(records))
        return records


class ScenarioStyleExtractor(BlockVisitor):
    """Extractor for codeceptjs: one Feature per file followed by Scenarios."""

    name = "scenario"
    feature_name = "Feature"
    scenario_name = "Scenario"

    def match(self, callee: Callee) -> RoleMatch | None:
        skip = _skip_state(callee)
        if skip is None:
            return None
        if callee.name == self.feature_name:
            return RoleMatch(Role.FEATURE, skip=skip)
        if callee.name == self.scenario_name:
            return RoleMatch(Role.TEST, skip=skip)
        return None

    def extract(self, tree: SyntaxTree) -> list[TestRecord]:
        records = self.visit(tree.root)
        log.debug("Extracted scenario-style tests", file=tree.path, count=len(records))
        return records

# 🧪⚙️
