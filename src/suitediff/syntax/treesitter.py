#
# src/suitediff/syntax/treesitter.py
#
"""
SyntaxTreeProvider implementation backed by tree-sitter grammars.
"""
from collections.abc import Sequence
from pathlib import PurePath

import structlog
from attrs import define
from tree_sitter import Node
from tree_sitter_language_pack import get_parser

from suitediff.exceptions import ParseFailure, UnresolvableLiteral
from suitediff.syntax.protocols import Callee, SyntaxTree

log = structlog.get_logger("syntax.treesitter")

# Grammar per file extension; anything not listed is parsed as JavaScript.
LANGUAGE_MAP = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}
DEFAULT_LANGUAGE = "javascript"

FUNCTION_NODE_TYPES = frozenset(
    {"arrow_function", "function_expression", "function", "generator_function"}
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def language_for_path(path: str) -> str:
    """Picks the tree-sitter grammar name for a source file."""
    return LANGUAGE_MAP.get(PurePath(path).suffix.lower(), DEFAULT_LANGUAGE)


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")


def _decode_escape(sequence: str) -> str:
    """Decodes one JavaScript escape sequence such as '\\n' or '\\u00e9'."""
    body = sequence[1:]
    if not body or body[0] in "\r\n":
        return ""  # line continuation
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    try:
        if body.startswith("u{"):
            return chr(int(body[2:-1], 16))
        if body[0] in "ux" and len(body) > 1:
            return chr(int(body[1:], 16))
    except ValueError:
        pass
    return body


def _string_value(node: Node) -> str:
    parts = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(_text(child))
        elif child.type == "escape_sequence":
            parts.append(_decode_escape(_text(child)))
    return "".join(parts)


def _template_value(node: Node) -> str:
    # Substitutions are kept verbatim, e.g. `adds ${a} and ${b}`; escapes are decoded.
    raw = node.text or b""
    offset = node.start_byte
    parts: list[str] = []
    cursor = 1
    for child in node.named_children:
        if child.type != "escape_sequence":
            continue
        parts.append(raw[cursor : child.start_byte - offset].decode("utf-8", errors="replace"))
        parts.append(_decode_escape(_text(child)))
        cursor = child.end_byte - offset
    parts.append(raw[cursor : len(raw) - 1].decode("utf-8", errors="replace"))
    return "".join(parts)


def _first_error_line(root: Node) -> int | None:
    pending = [root]
    while pending:
        node = pending.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        pending.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return None


@define(frozen=True, slots=True)
class TreeSitterNode:
    """Adapts a tree_sitter.Node to the SyntaxNode protocol."""

    node: Node

    @property
    def line(self) -> int | None:
        return self.node.start_point[0] + 1

    def children(self) -> Sequence["TreeSitterNode"]:
        return [TreeSitterNode(child) for child in self.node.named_children]

    def callee(self) -> Callee | None:
        if self.node.type != "call_expression":
            return None
        current = self.node.child_by_field_name("function")
        qualifiers: list[str] = []
        while current is not None and current.type == "member_expression":
            prop = current.child_by_field_name("property")
            if prop is None or prop.type != "property_identifier":
                return None
            qualifiers.append(_text(prop))
            current = current.child_by_field_name("object")
        if current is None or current.type != "identifier":
            return None
        return Callee(name=_text(current), qualifiers=tuple(reversed(qualifiers)))

    def _arguments(self) -> list[Node]:
        args = self.node.child_by_field_name("arguments")
        # Tagged templates carry a template_string here instead of an argument list.
        if args is None or args.type != "arguments":
            return []
        return [child for child in args.named_children if child.type != "comment"]

    def literal_argument(self, index: int) -> str:
        args = self._arguments()
        if index >= len(args):
            raise UnresolvableLiteral("missing argument", self.line)
        arg = args[index]
        if arg.type == "string":
            return _string_value(arg)
        if arg.type == "template_string":
            return _template_value(arg)
        raise UnresolvableLiteral(arg.type, arg.start_point[0] + 1)

    def function_body(self) -> "TreeSitterNode | None":
        for arg in self._arguments():
            if arg.type in FUNCTION_NODE_TYPES:
                body = arg.child_by_field_name("body")
                return TreeSitterNode(body) if body is not None else None
        return None


class TreeSitterProvider:
    """Parses JavaScript and TypeScript sources with tree-sitter."""

    def __init__(self) -> None:
        self._log = log.bind(provider_id=id(self))

    def parse(self, source: str, path: str) -> SyntaxTree:
        language = language_for_path(path)
        parse_log = self._log.bind(file=path, language=language)
        try:
            # Parsers are not shared so files can be parsed from worker threads.
            parser = get_parser(language)
            tree = parser.parse(source.encode("utf-8"))
        except Exception as e:
            parse_log.error("tree-sitter failed to parse file", error=str(e))
            raise ParseFailure(path, details=e) from e

        root = tree.root_node
        if root.has_error:
            line = _first_error_line(root)
            parse_log.warning("Syntax error in test file", line=line)
            raise ParseFailure(path, f"Syntax error near line {line}")

        parse_log.debug("Parsed test file", lines=root.end_point[0] + 1)
        return SyntaxTree(path=path, root=TreeSitterNode(root))

# 🧪⚙️
