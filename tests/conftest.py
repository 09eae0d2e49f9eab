# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from catalog.sa.database import Database
from catalog.sa.models import Base, Genre, Book, BookGenre, BookInstance, InstanceStatus
from web.main import create_app

@pytest.fixture
def database():
    """Create a fresh in-memory database for each test"""
    db = Database("sqlite://")
    Base.metadata.create_all(db.engine)
    yield db
    Base.metadata.drop_all(db.engine)
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def app(database):
    return create_app(database)

@pytest.fixture
def client(app):
    """TestClient that does not follow redirects, so they can be asserted on"""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client

@pytest.fixture
def sample_genre(db_session):
    """Create a sample genre for testing."""
    genre = Genre(name="Fiction")
    db_session.add(genre)
    db_session.commit()
    return genre

@pytest.fixture
def make_book(db_session):
    """Factory creating a book in the given genres with a number of instances."""
    def _make_book(title, genres, instances=0, summary=None):
        book = Book(title=title, summary=summary or f"Summary of {title}", isbn="9780000000000")
        db_session.add(book)
        db_session.flush()
        for genre in genres:
            db_session.add(BookGenre(book_id=book.id, genre_id=genre.id))
        for i in range(instances):
            db_session.add(BookInstance(
                book_id=book.id,
                imprint=f"{title}, printing {i + 1}",
                status=InstanceStatus.AVAILABLE.value
            ))
        db_session.commit()
        return book
    return _make_book

@pytest.fixture
def genre_with_books(db_session, sample_genre, make_book):
    """A genre with two books, each having instances."""
    make_book("The Left Hand of Darkness", [sample_genre], instances=2)
    make_book("A Wizard of Earthsea", [sample_genre], instances=1)
    return sample_genre


@pytest.fixture
def count_rows(db_session):
    """Count rows of a model, ignoring anything cached in the session"""
    def _count_rows(model) -> int:
        db_session.expire_all()
        return db_session.query(model).count()
    return _count_rows
