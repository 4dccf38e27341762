"""Page releases — diff, version and immutably snapshot published pages."""

__version__ = "0.1.0"
