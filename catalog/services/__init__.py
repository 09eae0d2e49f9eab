# catalog/services/__init__.py
from .genre_service import GenreService, DeleteResult

__all__ = ['GenreService', 'DeleteResult']
