"""Local Library catalog: genres, books and book instances."""

__version__ = "0.1.0"
