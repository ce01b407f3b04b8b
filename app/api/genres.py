# app/api/genres.py

from typing import List
from fastapi import APIRouter, HTTPException, Depends, Path
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.genre import Genre, GenreCreate
from app.services.genre_service import GenreService
from app.core.exceptions import ServiceError

router = APIRouter()


def get_genre_service(db: Session = Depends(get_db)) -> GenreService:
    return GenreService(db)


@router.get(
    "/",
    response_model=List[Genre],
    summary="List genres",
    description="All genres ordered by name.",
)
def get_all_genres(genre_service: GenreService = Depends(get_genre_service)):
    return genre_service.get_all_genres()


@router.get("/{genre_id}", response_model=Genre, summary="Genre by ID")
def get_genre_by_id(
    genre_id: int = Path(description="Genre ID"),
    genre_service: GenreService = Depends(get_genre_service),
):
    try:
        return genre_service.get_genre_by_id(genre_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.post("/", response_model=Genre, summary="Create genre")
def create_genre(
    genre_data: GenreCreate,
    genre_service: GenreService = Depends(get_genre_service),
):
    try:
        return genre_service.create_genre(genre_data.name)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.put("/{genre_id}", response_model=Genre, summary="Rename genre")
def update_genre(
    genre_data: GenreCreate,
    genre_id: int = Path(description="Genre ID"),
    genre_service: GenreService = Depends(get_genre_service),
):
    try:
        return genre_service.update_genre(genre_id, genre_data.name)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.delete(
    "/{genre_id}",
    response_model=Genre,
    summary="Delete genre",
    description="Delete a genre. Genres still used by movies cannot be deleted.",
)
def delete_genre(
    genre_id: int = Path(description="Genre ID"),
    genre_service: GenreService = Depends(get_genre_service),
):
    try:
        return genre_service.delete_genre(genre_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)
