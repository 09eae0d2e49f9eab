# catalog/sa/models/genre.py
from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import relationship, validates, Mapped, mapped_column
from .base import Base, TimestampMixin

GENRE_NAME_MIN_LENGTH = 3
GENRE_NAME_MAX_LENGTH = 100

class Genre(Base, TimestampMixin):
    __tablename__ = 'genre'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Not unique at the store level; duplicates are prevented by a name lookup before insert
    name: Mapped[str] = mapped_column(String(GENRE_NAME_MAX_LENGTH), nullable=False)

    # Relationships
    book_genres = relationship('BookGenre', back_populates='genre')

    # Convenience relationship
    books = relationship('Book', secondary='book_genre', viewonly=True, order_by='Book.title')

    __table_args__ = (
        # Search index
        Index('idx_genre_name', 'name'),
    )

    @validates('name')
    def validate_name(self, key, name):
        if name is None or len(name.strip()) < GENRE_NAME_MIN_LENGTH:
            raise ValueError(f"Genre name must contain at least {GENRE_NAME_MIN_LENGTH} characters")
        if len(name) > GENRE_NAME_MAX_LENGTH:
            raise ValueError(f"Genre name must contain at most {GENRE_NAME_MAX_LENGTH} characters")
        return name

    @property
    def url(self) -> str:
        """Canonical path of the genre detail page"""
        return f"/catalog/genre/{self.id}"

    def __repr__(self) -> str:
        return f"<Genre id={self.id} name={self.name!r}>"
