# catalog/sa/models/book.py
from datetime import date
from enum import Enum
from sqlalchemy import String, Integer, Text, Date, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class InstanceStatus(str, Enum):
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"

class BookGenre(Base, TimestampMixin):
    """Association model for books in genres"""
    __tablename__ = 'book_genre'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    genre_id: Mapped[int] = mapped_column(ForeignKey('genre.id'), primary_key=True)

    # Relationships
    book = relationship('Book', back_populates='book_genres')
    genre = relationship('Genre', back_populates='book_genres')

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)

    # Relationships
    book_genres = relationship('BookGenre', back_populates='book', cascade='all, delete-orphan')
    instances = relationship('BookInstance', back_populates='book', cascade='all, delete-orphan')

    # Convenience relationship
    genres = relationship('Genre', secondary='book_genre', viewonly=True)

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"

class BookInstance(Base, TimestampMixin):
    """A physical, lendable copy of a book"""
    __tablename__ = 'book_instance'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False, index=True)
    imprint: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=InstanceStatus.MAINTENANCE.value)
    due_back: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    book = relationship('Book', back_populates='instances')

    @property
    def url(self) -> str:
        return f"/catalog/bookinstance/{self.id}"
