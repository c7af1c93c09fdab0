"""Atto Language Server package.

This package provides:
- A pygls-based Language Server for Atto source files.
- A lightweight indexer that lists definitions and reports parse errors without evaluating code.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
