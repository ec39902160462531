# src/suitediff/runtime/__init__.py

"""
Runtime coordination of a comparison between two revisions.
"""

from .orchestrator import CompareOrchestrator

__all__ = ["CompareOrchestrator"]

# 🧪⚙️
