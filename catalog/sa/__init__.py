# catalog/sa/__init__.py
from .database import Database
from .models import (
    Base, Genre, Book, BookGenre, BookInstance, InstanceStatus
)

__all__ = [
    'Database',
    'Base',
    'Genre',
    'Book',
    'BookGenre',
    'BookInstance',
    'InstanceStatus'
]
