# app/models/genre.py

from sqlalchemy import Column, Integer, SmallInteger, String, DateTime
from sqlalchemy.sql import func
from app.database import Base

# genre ids are unsigned bytes
MAX_GENRE_ID = 255

# sqlite only autoincrements INTEGER primary keys
GenreIdType = SmallInteger().with_variant(Integer, "sqlite")


class GenreModel(Base):
    __tablename__ = "genres"

    id = Column(GenreIdType, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(
        DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp()
    )

    def __repr__(self):
        return f"<GenreModel(id={self.id}, name='{self.name}')>"
