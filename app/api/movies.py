# app/api/movies.py

from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, Path, Query, Form, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.movie import Movie, MovieDetails, MovieForm
from app.services.movie_service import MovieService
from app.services.poster import PosterFile
from app.models.genre import MAX_GENRE_ID
from app.core.exceptions import ServiceError

router = APIRouter()


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService(db)


def get_movie_form(
    title: str = Form(description="Title", max_length=250),
    year: int = Form(description="Release year"),
    rate: float = Form(description="Rating", allow_inf_nan=False),
    story_line: str = Form(alias="storyLine", description="Story line", max_length=2500),
    genre_id: int = Form(alias="genreId", description="Genre ID", ge=0, le=MAX_GENRE_ID),
) -> MovieForm:
    return MovieForm(
        title=title, year=year, rate=rate, story_line=story_line, genre_id=genre_id
    )


async def read_poster(poster: Optional[UploadFile]) -> Optional[PosterFile]:
    """Read an uploaded poster into memory; an empty file field counts as absent"""
    if poster is None or not poster.filename:
        return None
    return PosterFile(filename=poster.filename, content=await poster.read())


@router.get(
    "/",
    response_model=List[MovieDetails],
    summary="List movies",
    description="All movies with their genre name, highest rate first.",
)
def get_all_movies(movie_service: MovieService = Depends(get_movie_service)):
    return movie_service.get_all_movies()


@router.get(
    "/GetByGenreId",
    response_model=List[MovieDetails],
    summary="List movies of a genre",
    description="Movies of one genre, highest rate first. Unknown genres give an empty list.",
)
def get_movies_by_genre_id(
    genre_id: int = Query(default=0, alias="genreId", ge=0, le=MAX_GENRE_ID, description="Genre ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    return movie_service.get_all_movies(genre_id=genre_id)


@router.get(
    "/{movie_id}",
    response_model=MovieDetails,
    summary="Movie details",
)
def get_movie_by_id(
    movie_id: int = Path(description="Movie ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return movie_service.get_movie_details(movie_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.post(
    "/",
    response_model=Movie,
    summary="Create movie",
    description="Create a movie from a multipart form. A .jpg or .png poster of at most 1MB is required.",
)
async def create_movie(
    form: MovieForm = Depends(get_movie_form),
    poster: Optional[UploadFile] = File(default=None, description="Poster image"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return await run_in_threadpool(movie_service.create_movie, form, await read_poster(poster))
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.put(
    "/{movie_id}",
    response_model=Movie,
    summary="Update movie",
    description="Overwrite a movie's fields. The stored poster is kept unless a new one is uploaded.",
)
async def update_movie(
    movie_id: int = Path(description="Movie ID"),
    form: MovieForm = Depends(get_movie_form),
    poster: Optional[UploadFile] = File(default=None, description="Poster image"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return await run_in_threadpool(
            movie_service.update_movie, movie_id, form, await read_poster(poster)
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.delete(
    "/{movie_id}",
    response_model=Movie,
    summary="Delete movie",
)
def delete_movie(
    movie_id: int = Path(description="Movie ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return movie_service.delete_movie(movie_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)
