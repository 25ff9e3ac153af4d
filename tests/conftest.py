import pytest
from django.contrib.auth import get_user_model

from movies.models import Movie, Review

from .support import movie_attributes, review_attributes, user_attributes


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def make_movie(db):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        attrs = movie_attributes(title=f"Movie {counter['n']}")
        attrs.update(overrides)
        movie = Movie(**attrs)
        movie.full_clean()
        movie.save()
        return movie

    return _make


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        attrs = user_attributes(email=f"user{counter['n']}@example.com")
        attrs.update(overrides)
        return get_user_model().objects.create_user(**attrs)

    return _make


@pytest.fixture
def make_review(db):
    def _make(movie, user, **overrides):
        review = Review(movie=movie, user=user, **review_attributes(**overrides))
        review.full_clean()
        review.save()
        return review

    return _make


@pytest.fixture
def movie(make_movie):
    return make_movie(title="Iron Man")


@pytest.fixture
def user(make_user):
    return make_user(email="user@example.com")
