#
# src/suitediff/extraction/__init__.py
#
"""
Test declaration extraction sub-package for suitediff.
"""
from .factory import get_extractor
from .frameworks import BlockStyleExtractor, ScenarioStyleExtractor
from .protocols import Extractor
from .visitor import BlockVisitor, Role, RoleMatch

__all__ = [
    "BlockStyleExtractor",
    "BlockVisitor",
    "Extractor",
    "Role",
    "RoleMatch",
    "ScenarioStyleExtractor",
    "get_extractor",
]

# 🧪⚙️
