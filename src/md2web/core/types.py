"""Core type definitions."""

from typing import NewType

# Request path relative to the site root (e.g., "guide", "domain/", "")
# Distinct from FilePath to catch resolution mistakes
RequestPath = NewType("RequestPath", str)

# Markdown file path relative to the site root (e.g., "guide.md", "domain/main.md")
FilePath = NewType("FilePath", str)
