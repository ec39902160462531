#
# config/__init__.py
#
"""
Configuration handling sub-package for suitediff.

Exports the loading function and core configuration models.
"""

from .loader import load_config
from .models import CompareConfig, GlobalConfig, SuitediffConfig

__all__ = [
    "CompareConfig",
    "GlobalConfig",
    "SuitediffConfig",
    "load_config",
]

# 🧪⚙️
