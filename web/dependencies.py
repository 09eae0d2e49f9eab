# web/dependencies.py
from pathlib import Path
from typing import Iterator
from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from catalog.services import GenreService

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

def get_db(request: Request) -> Iterator[Session]:
    """Get a database session.

    The session comes from the Database bound to the application in
    create_app() and is closed when the request is complete.

    Yields:
        Session: A SQLAlchemy session
    """
    session = request.app.state.database.get_session()
    try:
        yield session
    finally:
        session.close()

def get_genre_service(db: Session = Depends(get_db)) -> GenreService:
    return GenreService(db)
