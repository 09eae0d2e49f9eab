# web/routes/genres.py

import logging
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from catalog.services import GenreService
from web.dependencies import get_genre_service, templates
from web.schemas.genre import GenreSubmission, genre_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["genres"])

GENRE_LIST_URL = "/catalog/genres"

def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)

@router.get("/genres", response_class=HTMLResponse)
def genre_list(request: Request, service: GenreService = Depends(get_genre_service)):
    """Display list of all genres, sorted by name."""
    genres = service.list_genres()
    logger.debug("Listing %d genres", len(genres))
    return templates.TemplateResponse(
        request, "genre_list.html", {"title": "Genre List", "genre_list": genres}
    )

# Registered before /genre/{genre_id} so "create" is never read as an ID
@router.get("/genre/create", response_class=HTMLResponse)
def genre_create_get(request: Request):
    """Display the empty genre creation form."""
    return templates.TemplateResponse(request, "genre_form.html", {"title": "Create Genre"})

@router.post("/genre/create", response_class=HTMLResponse)
def genre_create_post(
    request: Request,
    submission: GenreSubmission = Depends(genre_submission),
    service: GenreService = Depends(get_genre_service)
):
    """
    Create a genre from the submitted form.

    Invalid input redisplays the form with the sanitized value and every
    error. A name that already exists redirects to that genre instead of
    inserting a duplicate.
    """
    if not submission.is_valid:
        logger.debug("Rejected genre submission %r: %d error(s)", submission.name, len(submission.errors))
        return templates.TemplateResponse(
            request,
            "genre_form.html",
            {"title": "Create Genre", "genre": submission, "errors": submission.errors}
        )

    genre, _ = service.create_or_get_genre(submission.name)
    return _redirect(genre.url)

@router.get("/genre/{genre_id}", response_class=HTMLResponse)
def genre_detail(genre_id: int, request: Request, service: GenreService = Depends(get_genre_service)):
    """Display a genre and all of its books."""
    genre, books = service.get_genre_detail(genre_id)
    return templates.TemplateResponse(
        request,
        "genre_detail.html",
        {"title": "Genre Detail", "genre": genre, "genre_books": books}
    )

@router.get("/genre/{genre_id}/delete", response_class=HTMLResponse)
def genre_delete_get(genre_id: int, request: Request, service: GenreService = Depends(get_genre_service)):
    """Display the delete confirmation page listing the books that go with the genre."""
    genre, books = service.get_genre_for_delete(genre_id)
    return templates.TemplateResponse(
        request,
        "genre_delete.html",
        {"title": "Delete Genre", "genre": genre, "genre_books": books}
    )

@router.post("/genre/{genre_id}/delete")
def genre_delete_post(
    genre_id: int,
    genreid: int = Form(...),
    service: GenreService = Depends(get_genre_service)
):
    """
    Delete the genre named by the `genreid` form field, its books and their
    instances. Always redirects to the genre list, even if nothing matched.
    """
    if genreid != genre_id:
        logger.warning("Delete form for genre %s posted genreid=%s", genre_id, genreid)
    service.delete_genre_cascade(genreid)
    return _redirect(GENRE_LIST_URL)

@router.get("/genre/{genre_id}/update", response_class=HTMLResponse)
def genre_update_get(genre_id: int, request: Request, service: GenreService = Depends(get_genre_service)):
    """Display the genre form filled with the current values."""
    genre = service.get_genre(genre_id)
    return templates.TemplateResponse(
        request, "genre_form.html", {"title": "Update Genre", "genre": genre}
    )

@router.post("/genre/{genre_id}/update", response_class=HTMLResponse)
def genre_update_post(
    genre_id: int,
    request: Request,
    submission: GenreSubmission = Depends(genre_submission),
    service: GenreService = Depends(get_genre_service)
):
    """Replace the genre's name, or redisplay the form with errors."""
    candidate = submission.model_copy(update={"id": genre_id})
    if not candidate.is_valid:
        return templates.TemplateResponse(
            request,
            "genre_form.html",
            {"title": "Update Genre", "genre": candidate, "errors": candidate.errors}
        )

    genre = service.update_genre(genre_id, candidate.name)
    return _redirect(genre.url)
