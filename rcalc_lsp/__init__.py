"""rcalc Language Server package.

This package provides:
- A pygls-based Language Server for rcalc expression files.
- A lightweight indexer that reads documents with the rcalc parser without evaluating them.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
