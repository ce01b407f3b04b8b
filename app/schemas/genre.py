# app/schemas/genre.py

from pydantic import BaseModel, Field


class Genre(BaseModel):
    id: int = Field(description="Genre ID")
    name: str = Field(description="Genre name")

    class Config:
        from_attributes = True


class GenreCreate(BaseModel):
    name: str = Field(description="Genre name", min_length=1, max_length=100)
