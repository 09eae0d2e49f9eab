# web/schemas/genre.py
from typing import List, Optional
from fastapi import Form
from markupsafe import escape
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from catalog.sa.models import GENRE_NAME_MIN_LENGTH, GENRE_NAME_MAX_LENGTH

GENRE_NAME_MESSAGE = f"Genre name must contain at least {GENRE_NAME_MIN_LENGTH} characters"
GENRE_NAME_TOO_LONG_MESSAGE = f"Genre name must contain at most {GENRE_NAME_MAX_LENGTH} characters"

class GenreForm(BaseModel):
    """Trims, length-checks and then HTML-escapes a submitted genre name"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=GENRE_NAME_MIN_LENGTH, max_length=GENRE_NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def escape_name(cls, value: str) -> str:
        escaped = str(escape(value))
        # Escaping can push a name that fit past the column width
        if len(escaped) > GENRE_NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "string_too_long", GENRE_NAME_TOO_LONG_MESSAGE, {"max_length": GENRE_NAME_MAX_LENGTH}
            )
        return escaped

class FieldError(BaseModel):
    field: str
    msg: str
    value: str

class GenreSubmission(BaseModel):
    """A sanitized genre name plus every validation failure found for it"""
    id: Optional[int] = None
    name: str = ""
    errors: List[FieldError] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors

def _error_message(error: dict) -> str:
    if error["type"] == "string_too_long":
        return GENRE_NAME_TOO_LONG_MESSAGE
    return GENRE_NAME_MESSAGE

def validate_genre_name(raw_name: str) -> GenreSubmission:
    """Run GenreForm over a raw name, collecting errors instead of raising"""
    try:
        form = GenreForm(name=raw_name)
    except ValidationError as exc:
        sanitized = str(escape(raw_name.strip()))
        return GenreSubmission(
            name=sanitized,
            errors=[
                FieldError(field=str(error["loc"][0]), msg=_error_message(error), value=sanitized)
                for error in exc.errors()
            ]
        )
    return GenreSubmission(name=form.name)

def genre_submission(name: str = Form("")) -> GenreSubmission:
    """FastAPI dependency validating the `name` field of a genre form"""
    return validate_genre_name(name)
