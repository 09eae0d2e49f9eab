from .base import Base, TimestampMixin
from .genre import Genre, GENRE_NAME_MIN_LENGTH, GENRE_NAME_MAX_LENGTH
from .book import Book, BookGenre, BookInstance, InstanceStatus

__all__ = [
    'Base',
    'TimestampMixin',
    'Genre',
    'GENRE_NAME_MIN_LENGTH',
    'GENRE_NAME_MAX_LENGTH',
    'Book',
    'BookGenre',
    'BookInstance',
    'InstanceStatus'
]
