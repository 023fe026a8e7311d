"""printf-style formatting with flags, width and precision."""

__version__ = "0.1.0"
__all__ = ["digits", "flags", "formatter", "numeric", "padding", "plain", "text"]