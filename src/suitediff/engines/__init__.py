# src/suitediff/engines/__init__.py

"""
Version-control engines used to switch revisions.
"""

# 🧪⚙️
