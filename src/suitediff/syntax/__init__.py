#
# src/suitediff/syntax/__init__.py
#
"""
Syntax tree sub-package: the capability interface and its tree-sitter backend.
"""
from .protocols import Callee, SyntaxNode, SyntaxTree, SyntaxTreeProvider
from .treesitter import TreeSitterNode, TreeSitterProvider, language_for_path

__all__ = [
    "Callee",
    "SyntaxNode",
    "SyntaxTree",
    "SyntaxTreeProvider",
    "TreeSitterNode",
    "TreeSitterProvider",
    "language_for_path",
]

# 🧪⚙️
