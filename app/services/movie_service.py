# app/services/movie_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, desc
from app.models.movie import MovieModel
from app.models.genre import GenreModel
from app.schemas.movie import Movie, MovieDetails, MovieForm
from app.services.genre_service import GenreService
from app.services.poster import PosterFile, encode_poster, validate_poster
from app.core.config import Settings, get_settings
from app.core.exceptions import ErrorKind, ServiceError

logger = logging.getLogger(__name__)


class MovieService:

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()
        self.genre_service = GenreService(db)

    def get_all_movies(self, genre_id: Optional[int] = None) -> List[MovieDetails]:
        """Movies joined with their genre, highest rate first"""
        stmt = (
            select(MovieModel, GenreModel.name.label("genre_name"))
            .join(GenreModel, MovieModel.genre_id == GenreModel.id)
            .order_by(desc(MovieModel.rate))
        )
        if genre_id is not None:
            stmt = stmt.where(MovieModel.genre_id == genre_id)

        rows = self.db.execute(stmt).all()
        return [self._build_movie_details(movie, genre_name) for movie, genre_name in rows]

    def get_movie_details(self, movie_id: int) -> MovieDetails:
        stmt = (
            select(MovieModel, GenreModel.name.label("genre_name"))
            .join(GenreModel, MovieModel.genre_id == GenreModel.id)
            .where(MovieModel.id == movie_id)
        )
        row = self.db.execute(stmt).first()
        if not row:
            raise ServiceError(ErrorKind.MOVIE_NOT_FOUND, id=movie_id)

        movie, genre_name = row
        return self._build_movie_details(movie, genre_name)

    def validate_create(self, form: MovieForm, poster: Optional[PosterFile]) -> Optional[ErrorKind]:
        """First failing check for a new movie, or None"""
        error = validate_poster(poster, required=True, settings=self.settings)
        if error:
            return error

        if not self.genre_service.genre_exists(form.genre_id):
            return ErrorKind.INVALID_GENRE_ON_CREATE

        return None

    def validate_update(self, form: MovieForm, poster: Optional[PosterFile]) -> Optional[ErrorKind]:
        """First failing check for changes to an existing movie, or None"""
        if not self.genre_service.genre_exists(form.genre_id):
            return ErrorKind.INVALID_GENRE_ON_UPDATE

        return validate_poster(poster, required=False, settings=self.settings)

    def create_movie(self, form: MovieForm, poster: Optional[PosterFile]) -> Movie:
        error = self.validate_create(form, poster)
        if error:
            logger.warning("movie create rejected: %s", error.name)
            raise ServiceError(error)

        movie_model = MovieModel(
            title=form.title,
            year=form.year,
            rate=form.rate,
            story_line=form.story_line,
            poster=poster.content,
            genre_id=form.genre_id,
        )

        try:
            self.db.add(movie_model)
            self.db.commit()
            self.db.refresh(movie_model)
        except Exception:
            self.db.rollback()
            raise

        logger.info("movie %s created: %s", movie_model.id, movie_model.title)
        return self._build_movie_response(movie_model)

    def update_movie(
        self, movie_id: int, form: MovieForm, poster: Optional[PosterFile] = None
    ) -> Movie:
        """Overwrite scalar fields; the poster only when a new one is supplied"""
        movie_model = self._get_movie_model_by_id(movie_id)
        if not movie_model:
            raise ServiceError(ErrorKind.MOVIE_NOT_FOUND_ON_UPDATE, id=movie_id)

        error = self.validate_update(form, poster)
        if error:
            logger.warning("movie %s update rejected: %s", movie_id, error.name)
            raise ServiceError(error)

        try:
            if poster is not None:
                movie_model.poster = poster.content

            movie_model.title = form.title
            movie_model.genre_id = form.genre_id
            movie_model.year = form.year
            movie_model.story_line = form.story_line
            movie_model.rate = form.rate

            self.db.commit()
            self.db.refresh(movie_model)
        except Exception:
            self.db.rollback()
            raise

        logger.info("movie %s updated", movie_id)
        return self._build_movie_response(movie_model)

    def delete_movie(self, movie_id: int) -> Movie:
        movie_model = self._get_movie_model_by_id(movie_id)
        if not movie_model:
            raise ServiceError(ErrorKind.MOVIE_NOT_FOUND_ON_DELETE, id=movie_id)

        # attributes expire on commit
        deleted = self._build_movie_response(movie_model)
        try:
            self.db.delete(movie_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("movie %s deleted", movie_id)
        return deleted

    # helpers
    def _get_movie_model_by_id(self, movie_id: int) -> Optional[MovieModel]:
        return self.db.get(MovieModel, movie_id)

    def _build_movie_response(self, movie_model: MovieModel) -> Movie:
        return Movie(
            id=movie_model.id,
            title=movie_model.title,
            year=movie_model.year,
            rate=movie_model.rate,
            story_line=movie_model.story_line,
            poster=encode_poster(movie_model.poster),
            genre_id=movie_model.genre_id,
        )

    def _build_movie_details(self, movie_model: MovieModel, genre_name: str) -> MovieDetails:
        return MovieDetails(
            id=movie_model.id,
            genre_id=movie_model.genre_id,
            genre_name=genre_name,
            poster=encode_poster(movie_model.poster),
            rate=movie_model.rate,
            story_line=movie_model.story_line,
            title=movie_model.title,
            year=movie_model.year,
        )
