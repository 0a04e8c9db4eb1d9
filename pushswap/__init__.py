"""Two-stack integer sorting with a restricted instruction set."""

__version__ = "0.1.0"
__all__ = ["algorithm", "cli", "parsing", "stack", "structuring"]