"""Back-office API for managing catalog categories and products."""

__version__ = "1.0.0"
