"""Competitive-programming solutions as functions, with a small stdin command."""

__version__ = "0.1.0"
__all__ = ["__version__"]