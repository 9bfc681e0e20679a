"""
Keystroke recipe recorder

Reconstructs the minimal, replayable key vector of an editing command so
additional cursors can replay the same logical keystrokes.
"""

__version__ = "0.1.0"
