# catalog/sa/repositories/__init__.py
from .genre import GenreRepository
from .book import BookRepository, BookInstanceRepository

__all__ = ['GenreRepository', 'BookRepository', 'BookInstanceRepository']
