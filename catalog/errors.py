# catalog/errors.py
from typing import Optional


class CatalogError(Exception):
    """Base error carrying a human readable message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class GenreNotFound(CatalogError):
    status_code = 404

    def __init__(self, genre_id=None):
        super().__init__("Genre not found")
        self.genre_id = genre_id


class InvalidGenreName(CatalogError):
    """A name the Genre model refused to store."""

    status_code = 400
