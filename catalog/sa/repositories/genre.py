# catalog/sa/repositories/genre.py

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from catalog.sa.models import Genre, BookGenre

class GenreRepository:
    """Repository for managing Genre entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def list_genres(self) -> List[Genre]:
        """Get every genre ordered by name (ascending)."""
        return self.session.query(Genre).order_by(Genre.name.asc()).all()

    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        """Get a genre by its primary key.

        Args:
            genre_id: The ID of the genre to retrieve

        Returns:
            The Genre object if found, None otherwise
        """
        return self.session.get(Genre, genre_id)

    def get_by_name(self, name: str) -> Optional[Genre]:
        """Get a genre by its exact name.

        Args:
            name: The name of the genre to retrieve

        Returns:
            The Genre object if found, None otherwise
        """
        return self.session.query(Genre).filter(Genre.name == name).first()

    def create_genre(self, name: str) -> Genre:
        """Insert a new genre and commit.

        Args:
            name: Already sanitized genre name

        Returns:
            The created Genre object, with its ID assigned
        """
        genre = Genre(name=name)
        self.session.add(genre)
        self.session.commit()
        return genre

    def update_genre(self, genre_id: int, name: str) -> Optional[Genre]:
        """Replace the name of the genre matching genre_id.

        Model validators run again on assignment.

        Returns:
            The updated Genre object if found, None otherwise
        """
        genre = self.get_by_id(genre_id)
        if not genre:
            return None

        genre.name = name
        self.session.commit()
        return genre

    def delete_genre(self, genre_id: int) -> int:
        """Delete the genre and its book links without committing.

        Returns:
            Number of genre rows removed (0 for unknown IDs)
        """
        self.session.query(BookGenre).filter(BookGenre.genre_id == genre_id).delete(synchronize_session=False)
        return self.session.query(Genre).filter(Genre.id == genre_id).delete(synchronize_session=False)

    def count_books_by_genre(self) -> List[tuple[Genre, int]]:
        """Get (genre, book count) pairs ordered by genre name."""
        return (
            self.session.query(Genre, func.count(BookGenre.book_id))
            .outerjoin(BookGenre, BookGenre.genre_id == Genre.id)
            .group_by(Genre.id)
            .order_by(Genre.name.asc())
            .all()
        )
