# src/suitediff/extraction/visitor.py

"""
Generic walker that finds suite and test declarations in a syntax tree.

The walk is iterative: an explicit work list replaces the call stack and an
explicit list of SuiteFrames tracks the active suites, so deeply nested
suites cannot exhaust the interpreter's recursion limit.
"""

from enum import Enum, auto

import structlog
from attrs import define

from suitediff.exceptions import UnresolvableLiteral
from suitediff.models import DYNAMIC_NAME, SuiteFrame, TestRecord
from suitediff.syntax.protocols import Callee, SyntaxNode

log = structlog.get_logger("extraction.visitor")


class Role(Enum):
    """What a recognized call declares."""

    SUITE = auto()  # Nested group with a function body (describe).
    FEATURE = auto()  # File-level group without a body (Feature).
    TEST = auto()  # Leaf test case (it, Scenario).


@define(frozen=True, slots=True)
class RoleMatch:
    role: Role
    skip: bool = False


# Marks the point in the work list where a suite's body has been fully walked.
_POP_FRAME = object()


class BlockVisitor:
    """
    Base class for framework extractors.

    Subclasses decide which callees declare suites and tests by overriding
    `match`; the traversal, naming and skip propagation live here.
    """

    def match(self, callee: Callee) -> RoleMatch | None:
        raise NotImplementedError

    def resolve_name(self, node: SyntaxNode) -> str:
        """First call argument as a string, or the dynamic placeholder."""
        try:
            return node.literal_argument(0)
        except UnresolvableLiteral as e:
            log.debug(
                "Name is not a static literal, using placeholder",
                node_type=e.node_type,
                line=e.line,
                placeholder=DYNAMIC_NAME,
            )
            return DYNAMIC_NAME

    def visit(self, node: SyntaxNode, stack: list[SuiteFrame] | None = None) -> list[TestRecord]:
        """
        Walks `node` and returns the tests declared under it in source order.

        `stack` holds frames that are already active when the walk starts; it
        is copied, never modified.
        """
        frames: list[SuiteFrame] = list(stack or [])
        feature: SuiteFrame | None = None
        records: list[TestRecord] = []
        work: list[object] = [node]

        while work:
            item = work.pop()
            if item is _POP_FRAME:
                frames.pop()
                continue

            current: SyntaxNode = item  # type: ignore[assignment]
            callee = current.callee()
            matched = self.match(callee) if callee is not None else None

            if matched is None:
                work.extend(reversed(current.children()))
                continue

            name = self.resolve_name(current)

            if matched.role is Role.SUITE:
                frames.append(SuiteFrame(name=name, skip=matched.skip))
                work.append(_POP_FRAME)
                body = current.function_body()
                if body is not None:
                    work.append(body)
                else:
                    # Wrapped callbacks such as `function () {...}.bind(this)`.
                    work.extend(reversed(current.children()))
            elif matched.role is Role.FEATURE:
                feature = SuiteFrame(name=name, skip=matched.skip)
            else:
                active = [feature, *frames] if feature is not None else frames
                records.append(
                    TestRecord(
                        name=name,
                        suite_path=tuple(frame.name for frame in active),
                        suite_skips=tuple(frame.skip for frame in active),
                        skipped=matched.skip or any(frame.skip for frame in active),
                        line=current.line,
                    )
                )

        return records

# 🧪⚙️
