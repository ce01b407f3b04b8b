# app/services/genre_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from app.models.genre import GenreModel, MAX_GENRE_ID
from app.models.movie import MovieModel
from app.schemas.genre import Genre
from app.core.exceptions import ErrorKind, ServiceError

logger = logging.getLogger(__name__)


class GenreService:

    def __init__(self, db: Session):
        self.db = db

    def get_all_genres(self) -> List[Genre]:
        """All genres ordered by name"""
        stmt = select(GenreModel).order_by(GenreModel.name)
        genres = self.db.execute(stmt).scalars().all()
        return [self._build_genre_response(genre) for genre in genres]

    def get_genre_by_id(self, genre_id: int) -> Genre:
        genre_model = self._get_genre_model_by_id(genre_id)
        if not genre_model:
            raise ServiceError(ErrorKind.GENRE_NOT_FOUND, id=genre_id)
        return self._build_genre_response(genre_model)

    def genre_exists(self, genre_id: int) -> bool:
        stmt = select(GenreModel.id).where(GenreModel.id == genre_id)
        return self.db.execute(stmt).first() is not None

    def create_genre(self, name: str) -> Genre:
        """Add a genre while ids stay within an unsigned byte"""
        last_id = self.db.execute(select(func.max(GenreModel.id))).scalar() or 0
        if last_id >= MAX_GENRE_ID:
            logger.warning("refusing to create genre %s: id limit reached", name)
            raise ServiceError(ErrorKind.GENRE_IDS_EXHAUSTED, limit=MAX_GENRE_ID)

        try:
            new_genre = GenreModel(name=name)

            self.db.add(new_genre)
            self.db.commit()
            self.db.refresh(new_genre)
        except Exception:
            self.db.rollback()
            raise

        logger.info("genre %s created: %s", new_genre.id, new_genre.name)
        return self._build_genre_response(new_genre)

    def update_genre(self, genre_id: int, name: str) -> Genre:
        genre_model = self._get_genre_model_by_id(genre_id)
        if not genre_model:
            raise ServiceError(ErrorKind.GENRE_NOT_FOUND, id=genre_id)

        try:
            genre_model.name = name
            self.db.commit()
            self.db.refresh(genre_model)
        except Exception:
            self.db.rollback()
            raise

        logger.info("genre %s renamed to %s", genre_id, name)
        return self._build_genre_response(genre_model)

    def delete_genre(self, genre_id: int) -> Genre:
        """Delete a genre no movie refers to"""
        genre_model = self._get_genre_model_by_id(genre_id)
        if not genre_model:
            raise ServiceError(ErrorKind.GENRE_NOT_FOUND, id=genre_id)

        if self._get_genre_movie_count(genre_id) > 0:
            logger.warning("refusing to delete genre %s: still referenced", genre_id)
            raise ServiceError(ErrorKind.GENRE_IN_USE, id=genre_id)

        deleted = self._build_genre_response(genre_model)
        try:
            self.db.delete(genre_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("genre %s deleted", genre_id)
        return deleted

    def seed_default_genres(self, names: List[str]) -> int:
        """Insert names when the genres table is empty; returns rows added"""
        if self.db.execute(select(func.count(GenreModel.id))).scalar():
            return 0

        try:
            self.db.add_all([GenreModel(name=name) for name in names])
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("seeded %d genres", len(names))
        return len(names)

    # helpers
    def _get_genre_model_by_id(self, genre_id: int) -> Optional[GenreModel]:
        stmt = select(GenreModel).where(GenreModel.id == genre_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def _get_genre_movie_count(self, genre_id: int) -> int:
        stmt = select(func.count(MovieModel.id)).where(MovieModel.genre_id == genre_id)
        return self.db.execute(stmt).scalar() or 0

    def _build_genre_response(self, genre_model: GenreModel) -> Genre:
        return Genre(id=genre_model.id, name=genre_model.name)
