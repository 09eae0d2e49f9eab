# catalog/services/genre_service.py

import logging
from dataclasses import dataclass
from typing import List, Tuple
from sqlalchemy.orm import Session

from catalog.errors import GenreNotFound, InvalidGenreName
from catalog.sa.models import Genre, Book
from catalog.sa.repositories import GenreRepository, BookRepository, BookInstanceRepository

logger = logging.getLogger(__name__)

# Primary keys are signed 64-bit integers; anything outside cannot be bound
MIN_GENRE_ID = -2**63
MAX_GENRE_ID = 2**63 - 1

def _storable(genre_id: int) -> bool:
    return MIN_GENRE_ID <= genre_id <= MAX_GENRE_ID

@dataclass(frozen=True)
class DeleteResult:
    """Row counts removed by a cascade delete"""
    genres: int = 0
    books: int = 0
    instances: int = 0

class GenreService:
    def __init__(self, session: Session):
        self.session = session
        self.genres = GenreRepository(session)
        self.books = BookRepository(session)
        self.instances = BookInstanceRepository(session)

    def list_genres(self) -> List[Genre]:
        return self.genres.list_genres()

    def _get_or_raise(self, genre_id: int) -> Genre:
        genre = self.genres.get_by_id(genre_id) if _storable(genre_id) else None
        if genre is None:
            raise GenreNotFound(genre_id)
        return genre

    def get_genre(self, genre_id: int) -> Genre:
        return self._get_or_raise(genre_id)

    def get_genre_detail(self, genre_id: int) -> Tuple[Genre, List[Book]]:
        """Get a genre and the title/summary of every book in it"""
        genre = self._get_or_raise(genre_id)
        return genre, self.books.get_books_by_genre(genre_id, summary_only=True)

    def get_genre_for_delete(self, genre_id: int) -> Tuple[Genre, List[Book]]:
        """Get a genre and its full books, for the delete confirmation page"""
        genre = self._get_or_raise(genre_id)
        return genre, self.books.get_books_by_genre(genre_id)

    def create_or_get_genre(self, name: str) -> Tuple[Genre, bool]:
        """
        Return the genre with exactly this name, inserting it first if needed.

        The lookup and the insert are separate statements, so two concurrent
        submissions of a new name can both insert.
        """
        existing = self.genres.get_by_name(name)
        if existing:
            logger.info("Genre %r already exists as id=%s", name, existing.id)
            return existing, False

        try:
            genre = self.genres.create_genre(name)
        except ValueError as e:
            raise InvalidGenreName(str(e)) from e
        logger.info("Created genre %r with id=%s", name, genre.id)
        return genre, True

    def update_genre(self, genre_id: int, name: str) -> Genre:
        if not _storable(genre_id):
            raise GenreNotFound(genre_id)
        try:
            genre = self.genres.update_genre(genre_id, name)
        except ValueError as e:
            self.session.rollback()
            raise InvalidGenreName(str(e)) from e
        if genre is None:
            raise GenreNotFound(genre_id)
        logger.info("Updated genre id=%s to %r", genre_id, name)
        return genre

    def delete_genre_cascade(self, genre_id: int) -> DeleteResult:
        """
        Delete a genre, every book that references it and every instance of
        those books, in a single transaction. Unknown IDs delete nothing.
        """
        if not _storable(genre_id):
            logger.info("Nothing to delete for out-of-range genre id=%s", genre_id)
            return DeleteResult()

        book_ids = self.books.get_book_ids_by_genre(genre_id)
        try:
            instances = self.instances.delete_instances_by_books(book_ids)
            books = self.books.delete_books_by_genre(genre_id)
            genres = self.genres.delete_genre(genre_id)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        result = DeleteResult(genres=genres, books=books, instances=instances)
        logger.info(
            "Deleted genre id=%s: %d genre(s), %d book(s), %d instance(s)",
            genre_id, result.genres, result.books, result.instances
        )
        return result
