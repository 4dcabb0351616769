"""pyfc - FC-style file comparison."""

__version__ = "0.1.0"
