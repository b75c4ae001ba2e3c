"""biasscan — inclusive-language scanner for source code."""

__version__ = "0.1.0"
