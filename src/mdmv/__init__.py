"""mdmv - move markdown files together with their images."""

__version__ = "0.1.0"
