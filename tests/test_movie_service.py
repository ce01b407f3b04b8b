import pytest
from pydantic import ValidationError

from app.core.exceptions import ErrorKind, ServiceError
from app.schemas.movie import MovieForm
from app.services.movie_service import MovieService
from app.services.poster import PosterFile


def form(genre_id):
    return MovieForm(title="X", year=2020, rate=7.5, story_line="...", genre_id=genre_id)


def test_validate_create_order(db_session, genres):
    service = MovieService(db_session)

    assert service.validate_create(form(99), None) is ErrorKind.POSTER_REQUIRED
    assert service.validate_create(form(99), PosterFile("p.txt", b"x")) is ErrorKind.POSTER_EXTENSION
    assert service.validate_create(form(99), PosterFile("p.png", b"x")) is ErrorKind.INVALID_GENRE_ON_CREATE
    assert service.validate_create(form(genres["drama"]), PosterFile("p.png", b"x")) is None


def test_validate_update_checks_genre_first(db_session, genres):
    service = MovieService(db_session)

    assert service.validate_update(form(99), PosterFile("p.txt", b"x")) is ErrorKind.INVALID_GENRE_ON_UPDATE
    assert service.validate_update(form(genres["drama"]), PosterFile("p.txt", b"x")) is ErrorKind.POSTER_EXTENSION
    assert service.validate_update(form(genres["drama"]), None) is None


def test_service_error_formats_message():
    error = ServiceError(ErrorKind.MOVIE_NOT_FOUND_ON_UPDATE, id=5)

    assert error.status_code == 404
    assert error.detail == "no movies found with ID! 5"
    assert str(error) == "no movies found with ID! 5"


def test_service_calls_run_synchronously(db_session, genres, make_movie):
    make_movie(genres["drama"], title="Low", rate=2.0)
    make_movie(genres["comedy"], title="High", rate=8.0)
    service = MovieService(db_session)

    movies = service.get_all_movies()
    assert [m.title for m in movies] == ["High", "Low"]

    deleted = service.delete_movie(movies[0].id)
    assert deleted.title == "High"
    assert [m.title for m in service.get_all_movies()] == ["Low"]


def test_form_rejects_non_finite_rate(genres):
    with pytest.raises(ValidationError):
        MovieForm(title="X", year=2020, rate=float("nan"), story_line="...", genre_id=genres["drama"])
