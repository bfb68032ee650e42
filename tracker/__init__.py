"""
Personal Tracker - Source Package

A personal task and expense tracker driven by a small line-oriented
command language, persisted to plain pipe-delimited text files.

DESIGN PRINCIPLES:
1. One parser, one closed set of commands
2. Fail early, fail visibly (user errors never crash the session)
3. Files stay human-readable
4. Every command is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
