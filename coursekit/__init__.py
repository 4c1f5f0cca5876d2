"""Search trees, fixed-size record tables with an interactive shell, and string helpers."""

__version__ = "0.1.0"
__all__ = ["bst", "randtree", "t234", "records", "variants", "shell", "labs"]