# app/models/movie.py

from sqlalchemy import Column, Integer, String, Float, LargeBinary, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base
from app.models.genre import GenreIdType


class MovieModel(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(250), nullable=False)
    year = Column(Integer, nullable=False)
    rate = Column(Float, nullable=False)
    story_line = Column(String(2500), nullable=False)
    poster = Column(LargeBinary, nullable=True)
    genre_id = Column(GenreIdType, ForeignKey("genres.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(
        DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp()
    )

    def __repr__(self):
        return f"<MovieModel(id={self.id}, title='{self.title}', genre_id={self.genre_id})>"
