"""ASCII-only upper-casing for strings; see the ``case`` module."""

__version__ = "0.1.0"
__all__ = ["case"]