"""In-memory hotel reservation engine."""

__version__ = "0.1.0"
