"""typelisp language server and REPL integration package.

This package provides:
- A pygls-based Language Server for typelisp source files.
- A document indexer that finds definitions and reader errors without evaluation.
- A simple TCP REPL server to evaluate code via the Interpreter.

Note: The LSP does not evaluate user buffers; it only reads them.
"""

__all__ = [
    "server",
    "indexer",
    "repl_server",
]
