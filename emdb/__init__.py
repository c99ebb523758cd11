"""Read-only value handles over memory-mapped byte ranges or owned bytes."""

__version__ = "0.9.0"
__all__ = ["__version__"]