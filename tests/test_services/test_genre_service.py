# tests/test_services/test_genre_service.py

import pytest
from catalog.errors import GenreNotFound, InvalidGenreName
from catalog.sa.models import Genre, Book, BookInstance
from catalog.services import GenreService, DeleteResult

@pytest.fixture
def service(db_session):
    return GenreService(db_session)

@pytest.fixture
def unrelated(db_session, make_book):
    """A second genre with its own book and instances, which must survive deletes."""
    genre = Genre(name="Poetry")
    db_session.add(genre)
    db_session.commit()
    make_book("Leaves of Grass", [genre], instances=2)
    return genre

def test_get_genre_detail(service, genre_with_books):
    genre, books = service.get_genre_detail(genre_with_books.id)
    assert genre.id == genre_with_books.id
    assert [b.title for b in books] == ["A Wizard of Earthsea", "The Left Hand of Darkness"]

def test_get_genre_detail_without_books(service, sample_genre):
    genre, books = service.get_genre_detail(sample_genre.id)
    assert genre.name == "Fiction"
    assert books == []

def test_get_genre_detail_not_found(service):
    with pytest.raises(GenreNotFound) as exc_info:
        service.get_genre_detail(0)
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Genre not found"

def test_get_genre_not_found(service):
    with pytest.raises(GenreNotFound):
        service.get_genre(42)

def test_get_genre_for_delete_not_found(service):
    with pytest.raises(GenreNotFound):
        service.get_genre_for_delete(42)

def test_create_new_genre(service, db_session, count_rows):
    genre, created = service.create_or_get_genre("Fiction")
    assert created is True
    assert genre.id is not None
    assert count_rows(Genre) == 1

def test_create_existing_genre_is_idempotent(service, db_session, sample_genre, count_rows):
    genre, created = service.create_or_get_genre("Fiction")
    assert created is False
    assert genre.id == sample_genre.id
    assert count_rows(Genre) == 1

def test_update_genre(service, sample_genre):
    genre = service.update_genre(sample_genre.id, "Speculative Fiction")
    assert genre.name == "Speculative Fiction"

def test_update_vanished_genre(service):
    with pytest.raises(GenreNotFound):
        service.update_genre(777, "Speculative Fiction")

def test_delete_cascade(service, db_session, genre_with_books, unrelated, count_rows):
    genre_id = genre_with_books.id
    result = service.delete_genre_cascade(genre_id)

    assert result == DeleteResult(genres=1, books=2, instances=3)
    db_session.expire_all()
    assert db_session.get(Genre, genre_id) is None
    assert [g.name for g in db_session.query(Genre).all()] == ["Poetry"]
    assert [b.title for b in db_session.query(Book).all()] == ["Leaves of Grass"]
    assert count_rows(BookInstance) == 2

def test_delete_nonexistent_genre_is_noop(service, db_session, unrelated, count_rows):
    result = service.delete_genre_cascade(123456)

    assert result == DeleteResult()
    assert count_rows(Genre) == 1
    assert count_rows(Book) == 1
    assert count_rows(BookInstance) == 2

def test_delete_cascade_rolls_back_on_failure(service, db_session, genre_with_books, monkeypatch, count_rows):
    """A failing step leaves every row in place."""
    def fail(genre_id):
        raise RuntimeError("boom")

    monkeypatch.setattr(service.genres, "delete_genre", fail)

    with pytest.raises(RuntimeError):
        service.delete_genre_cascade(genre_with_books.id)

    assert count_rows(Genre) == 1
    assert count_rows(Book) == 2
    assert count_rows(BookInstance) == 3

@pytest.mark.parametrize("genre_id", [2**63, -2**63 - 1, 123456789012345678901234])
def test_out_of_range_ids_are_not_found(service, genre_id):
    with pytest.raises(GenreNotFound):
        service.get_genre(genre_id)
    with pytest.raises(GenreNotFound):
        service.get_genre_detail(genre_id)
    with pytest.raises(GenreNotFound):
        service.get_genre_for_delete(genre_id)
    with pytest.raises(GenreNotFound):
        service.update_genre(genre_id, "Horror")

def test_delete_out_of_range_id_is_noop(service, genre_with_books, count_rows):
    assert service.delete_genre_cascade(2**63) == DeleteResult()
    assert count_rows(Genre) == 1
    assert count_rows(Book) == 2

def test_create_rejected_by_model(service, count_rows):
    with pytest.raises(InvalidGenreName) as exc_info:
        service.create_or_get_genre("x" * 101)
    assert exc_info.value.status_code == 400
    assert count_rows(Genre) == 0

def test_update_rejected_by_model(service, db_session, sample_genre):
    with pytest.raises(InvalidGenreName):
        service.update_genre(sample_genre.id, "x" * 101)
    db_session.expire_all()
    assert db_session.get(Genre, sample_genre.id).name == "Fiction"
