"""A side-scrolling arcade game: a duck, coloured pipes, power-ups and a best score."""

__version__ = "1.0.0"
__all__ = ["__version__"]