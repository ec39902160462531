# src/suitediff/cli/__init__.py

# 🖥️⚙️
