#
# src/suitediff/syntax/protocols.py
#
"""
Defines the minimal capability interface the extractors need from a syntax tree.

Any parser can back the extractors as long as its nodes can answer these
four questions: who is being called, what is the Nth argument as a static
string, which function literal is attached, and what are the child nodes.
"""
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from attrs import define, field


@define(frozen=True, slots=True)
class Callee:
    """
    Identity of a called function.

    `describe.skip(...)` resolves to name="describe", qualifiers=("skip",);
    a plain `it(...)` has no qualifiers.
    """
    name: str
    qualifiers: tuple[str, ...] = field(factory=tuple)

    def has_qualifier(self, qualifier: str) -> bool:
        return qualifier in self.qualifiers


@runtime_checkable
class SyntaxNode(Protocol):
    """A node of a parsed source file."""

    @property
    def line(self) -> int | None:
        """1-based line where the node starts, if known."""
        ...

    def children(self) -> Sequence["SyntaxNode"]:
        """Child nodes in source order."""
        ...

    def callee(self) -> Callee | None:
        """Callee identity when this node is a call-like construct, else None."""
        ...

    def literal_argument(self, index: int) -> str:
        """
        Returns the Nth call argument as a string literal or template text.

        Raises:
            UnresolvableLiteral: the argument is missing or not static.
        """
        ...

    def function_body(self) -> "SyntaxNode | None":
        """Body of the first function-literal argument of a call, if any."""
        ...


@define(frozen=True, slots=True)
class SyntaxTree:
    """A parsed source file."""
    path: str
    root: SyntaxNode


@runtime_checkable
class SyntaxTreeProvider(Protocol):
    """Turns source text into a SyntaxTree."""

    def parse(self, source: str, path: str) -> SyntaxTree:
        """
        Parses source text.

        Raises:
            ParseFailure: the source is malformed.
        """
        ...

# 🧪⚙️
