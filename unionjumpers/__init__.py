"""A cooperative two-runner platform jumping game: world physics, stages and a pygame front end."""

__version__ = "0.1.0"

__all__ = ["__version__"]