"""Documentation chat API for the Vadalog docs site."""

__version__ = "1.0.0"
