"""FuncLang Language Server package.

This package provides:
- A pygls-based Language Server for FuncLang.
- A lightweight indexer that scans documents for top-level definitions without evaluation.

Note: The LSP does not evaluate user buffers; it reads them and builds a static index.
"""

__all__ = [
    "server",
    "indexer",
]
