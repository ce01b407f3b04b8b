# app/schemas/movie.py

from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from app.models.genre import MAX_GENRE_ID


class _MovieBase(BaseModel):
    id: int = Field(description="Movie ID")
    title: str = Field(description="Title")
    year: int = Field(description="Release year")
    rate: float = Field(description="Rating")
    story_line: str = Field(description="Story line")
    poster: Optional[str] = Field(default=None, description="Poster image bytes, base64 encoded")
    genre_id: int = Field(description="Genre ID")

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class Movie(_MovieBase):
    """Stored movie record, returned by write operations"""


class MovieDetails(_MovieBase):
    """Read projection of a movie joined with its genre name"""

    genre_name: str = Field(description="Genre name")


class MovieForm(BaseModel):
    """Scalar fields of the create/update form"""

    title: str = Field(max_length=250)
    year: int
    rate: float = Field(allow_inf_nan=False)
    story_line: str = Field(max_length=2500)
    genre_id: int = Field(ge=0, le=MAX_GENRE_ID)
