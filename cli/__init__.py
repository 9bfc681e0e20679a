"""
keyrecipe CLI - Keystroke recipe tooling

Commands:
- keyrecipe resolve - Resolve captured command phases into replayable keys
- keyrecipe version - Show version information
"""

__version__ = "0.1.0"
