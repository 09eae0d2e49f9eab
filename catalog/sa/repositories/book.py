# catalog/sa/repositories/book.py

from typing import Iterable, List
from sqlalchemy.orm import Session, load_only
from catalog.sa.models import Book, BookGenre, BookInstance

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_books_by_genre(self, genre_id: int, summary_only: bool = False) -> List[Book]:
        """
        Get every book that references the genre, ordered by title.
        With summary_only, only the title and summary columns are loaded.
        """
        query = (
            self.session.query(Book)
            .join(BookGenre, BookGenre.book_id == Book.id)
            .filter(BookGenre.genre_id == genre_id)
            .order_by(Book.title)
        )
        if summary_only:
            query = query.options(load_only(Book.title, Book.summary))
        return query.all()

    def get_book_ids_by_genre(self, genre_id: int) -> List[int]:
        rows = (
            self.session.query(BookGenre.book_id)
            .filter(BookGenre.genre_id == genre_id)
            .all()
        )
        return [row.book_id for row in rows]

    def delete_books_by_genre(self, genre_id: int) -> int:
        """
        Delete every book that references the genre, together with all of
        their genre links. Does not commit.
        """
        return self.delete_books(self.get_book_ids_by_genre(genre_id))

    def delete_books(self, book_ids: Iterable[int]) -> int:
        """
        Delete the given books and all of their genre links. Does not commit.
        """
        book_ids = list(book_ids)
        if not book_ids:
            return 0
        self.session.query(BookGenre).filter(BookGenre.book_id.in_(book_ids)).delete(synchronize_session=False)
        return self.session.query(Book).filter(Book.id.in_(book_ids)).delete(synchronize_session=False)


class BookInstanceRepository:
    def __init__(self, session: Session):
        self.session = session

    def delete_instances_by_books(self, book_ids: Iterable[int]) -> int:
        """
        Delete every instance of the given books. Does not commit.
        """
        book_ids = list(book_ids)
        if not book_ids:
            return 0
        return (
            self.session.query(BookInstance)
            .filter(BookInstance.book_id.in_(book_ids))
            .delete(synchronize_session=False)
        )
