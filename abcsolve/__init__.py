"""Solutions to AtCoder Beginner Contest problems, one module per contest, with a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]