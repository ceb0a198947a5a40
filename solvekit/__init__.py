"""Solutions to classic algorithmic problems and a judge-style command-line runner."""

__version__ = "0.1.0"