"""An arcade shooter played inside a shrinking window, built on pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]