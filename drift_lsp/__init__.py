"""drift Language Server package.

This package provides:
- A pygls-based Language Server for the drift language.
- An indexer that lexes and compiles documents without running them.

Note: The LSP does not evaluate user buffers.
"""

__all__ = [
    "server",
    "indexer",
]
