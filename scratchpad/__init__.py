"""A borderless pad for freehand drawing and quick typed notes, saved as PNG."""

__version__ = "0.1.0"
__all__ = ["__version__"]