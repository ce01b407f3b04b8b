import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db, init_db
from app.main import app
from app.models import GenreModel, MovieModel


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def genres(db_session):
    drama = GenreModel(name="Drama")
    comedy = GenreModel(name="Comedy")
    db_session.add_all([drama, comedy])
    db_session.commit()
    return {"drama": drama.id, "comedy": comedy.id}


@pytest.fixture
def make_movie(db_session):
    def _make_movie(genre_id, title="Movie", rate=5.0, poster=b"poster", year=2000):
        movie = MovieModel(
            title=title,
            year=year,
            rate=rate,
            story_line=f"{title} story",
            poster=poster,
            genre_id=genre_id,
        )
        db_session.add(movie)
        db_session.commit()
        return movie.id

    return _make_movie


@pytest.fixture
def movie_form():
    def _movie_form(genre_id, **overrides):
        form = {
            "title": "X",
            "year": "2020",
            "rate": "7.5",
            "storyLine": "...",
            "genreId": str(genre_id),
        }
        form.update(overrides)
        return form

    return _movie_form
