"""Movie search HTTP service building blocks and small string utilities."""

__version__ = "0.1.0"