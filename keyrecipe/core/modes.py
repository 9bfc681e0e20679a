"""
Editing mode tags reported by the host editor.
"""

from enum import Enum


class ModeTag(str, Enum):
    """Named editing mode a host session can be in."""
    INSERT = "insert"
    MOTION = "motion"
    VISUAL = "visual"
    NORMAL = "normal"
    REPLACE = "replace"
    OPERATOR = "operator"
    EMACS = "emacs"
