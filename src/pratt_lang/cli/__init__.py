"""
Pratt Lang Command-Line Interface
=================================

- **prattlex**: tokenize a source file and print its tokens

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["prattlex"]
