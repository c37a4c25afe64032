"""Element trees, colours and layout containers for building user interfaces."""

__version__ = "0.1.0"