"""
KPLC Command-Line Interface
===========================

This package provides command-line tools for KPLC:

- **kplex**: dump the token stream of a KPL source file

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["kplex"]
