"""
Exception types for command key reconstruction.
"""


class KeyRecipeError(Exception):
    """Base class for errors raised while recording or resolving keys."""
    pass


class TypeMismatchError(KeyRecipeError):
    """Raised when a slot value cannot be appended to or read as a key vector."""
    pass


class MalformedKeyVectorError(KeyRecipeError):
    """Raised when a key vector contains something that is not a key event."""
    pass


class UnknownSlotError(KeyRecipeError):
    """Raised when the property store is addressed with an unrecognised slot."""
    pass
