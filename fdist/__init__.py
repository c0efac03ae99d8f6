"""fdist - Flutter release packaging CLI."""

__version__ = "0.3.0"
