import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from movies.models import Favorite, Review

from .support import PASSWORD, days_from_today

User = get_user_model()


@pytest.fixture
def signed_in_client(client, user):
    client.force_login(user)
    return client


@pytest.mark.django_db
class TestMovieList:
    def test_lists_released_movies_by_default(self, client, make_movie):
        released = make_movie(title="Iron Man")
        make_movie(title="Avengers: Secret Wars", released_on=days_from_today(120))

        response = client.get(reverse("movies:list"))

        assert response.status_code == 200
        assert list(response.context["movies"]) == [released]
        assert response.context["filter"] == "released"

    @pytest.mark.parametrize("name", ["upcoming", "recent", "hits", "flops"])
    def test_applies_named_filter(self, client, make_movie, name):
        response = client.get(reverse("movies:list"), {"filter": name})

        assert response.status_code == 200
        assert response.context["filter"] == name

    def test_upcoming_filter(self, client, make_movie):
        make_movie(title="Iron Man")
        upcoming = make_movie(title="Avengers: Secret Wars", released_on=days_from_today(120))

        response = client.get(reverse("movies:list"), {"filter": "upcoming"})

        assert list(response.context["movies"]) == [upcoming]

    def test_unknown_filter_falls_back_to_released(self, client, make_movie):
        response = client.get(reverse("movies:list"), {"filter": "bogus"})

        assert response.context["filter"] == "released"

    def test_search_and_rating(self, client, make_movie):
        iron_man = make_movie(title="Iron Man", rating="PG-13")
        make_movie(title="Iron Giant", rating="PG")
        make_movie(title="Superman", rating="PG-13")

        response = client.get(reverse("movies:list"), {"q": "iron", "rating": "PG-13"})

        assert list(response.context["movies"]) == [iron_man]


@pytest.mark.django_db
class TestMovieDetail:
    def test_shows_movie_reviews_and_fans(self, client, movie, user, make_review):
        review = make_review(movie, user)
        Favorite.objects.create(user=user, movie=movie)

        response = client.get(movie.get_absolute_url())

        assert response.status_code == 200
        assert response.context["movie"] == movie
        assert list(response.context["reviews"]) == [review]
        assert list(response.context["fans"]) == [user]
        assert response.context["is_favorite"] is False

    def test_unicode_and_punctuation_titles_are_linked(self, client, make_movie):
        seven_samurai = make_movie(title="七人の侍")
        make_movie(title="!!!")

        response = client.get(reverse("movies:list"))

        assert response.status_code == 200
        assert seven_samurai.get_absolute_url().encode() in response.content
        detail = client.get(seven_samurai.get_absolute_url())
        assert detail.status_code == 200
        assert detail.context["movie"] == seven_samurai

    def test_missing_movie_is_404(self, client, db):
        response = client.get(reverse("movies:detail", kwargs={"slug": "nope"}))

        assert response.status_code == 404


@pytest.mark.django_db
class TestCreateReview:
    def test_requires_login(self, client, movie):
        url = reverse("movies:review", kwargs={"slug": movie.slug})

        response = client.post(url, {"stars": 4, "comment": "Great fun"})

        assert response.status_code == 302
        assert reverse("login") in response.url
        assert Review.objects.count() == 0

    def test_creates_review(self, signed_in_client, movie, user):
        url = reverse("movies:review", kwargs={"slug": movie.slug})

        response = signed_in_client.post(url, {"stars": 4, "comment": "Great fun"})

        assert response.status_code == 302
        assert response.url == movie.get_absolute_url()
        review = Review.objects.get()
        assert (review.movie, review.user, review.stars) == (movie, user, 4)

    def test_invalid_review_rerenders_detail(self, signed_in_client, movie):
        url = reverse("movies:review", kwargs={"slug": movie.slug})

        response = signed_in_client.post(url, {"stars": 9, "comment": ""})

        assert response.status_code == 400
        assert "stars" in response.context["form"].errors
        assert "comment" in response.context["form"].errors
        assert Review.objects.count() == 0

    def test_rejects_get(self, signed_in_client, movie):
        response = signed_in_client.get(reverse("movies:review", kwargs={"slug": movie.slug}))

        assert response.status_code == 405


@pytest.mark.django_db
class TestToggleFavorite:
    def test_fave_then_unfave(self, signed_in_client, movie, user):
        url = reverse("movies:favorite", kwargs={"slug": movie.slug})

        signed_in_client.post(url)
        assert list(user.favorite_movies.all()) == [movie]
        assert signed_in_client.get(movie.get_absolute_url()).context["is_favorite"] is True

        signed_in_client.post(url)
        assert user.favorite_movies.count() == 0

    def test_requires_login(self, client, movie):
        response = client.post(reverse("movies:favorite", kwargs={"slug": movie.slug}))

        assert response.status_code == 302
        assert Favorite.objects.count() == 0


@pytest.mark.django_db
class TestAccounts:
    def test_signup_creates_and_logs_in_user(self, client):
        response = client.post(reverse("accounts:signup"), {
            "name": "Larry",
            "email": "Larry@Example.com",
            "password1": PASSWORD,
            "password2": PASSWORD,
        })

        user = User.objects.get()
        assert user.email == "larry@example.com"
        assert response.status_code == 302
        assert response.url == reverse("accounts:profile", kwargs={"user_id": user.id})
        assert int(client.session["_auth_user_id"]) == user.id

    def test_signup_with_mismatched_passwords(self, client):
        response = client.post(reverse("accounts:signup"), {
            "name": "Larry",
            "email": "larry@example.com",
            "password1": PASSWORD,
            "password2": "nomatch",
        })

        assert response.status_code == 200
        assert "password2" in response.context["form"].errors
        assert User.objects.count() == 0

    def test_login_with_email(self, client, user):
        response = client.post(reverse("login"), {"username": user.email, "password": PASSWORD})

        assert response.status_code == 302
        assert int(client.session["_auth_user_id"]) == user.id

    def test_profile_lists_reviews_and_favorites(self, client, user, movie, make_review):
        review = make_review(movie, user)
        Favorite.objects.create(user=user, movie=movie)

        response = client.get(reverse("accounts:profile", kwargs={"user_id": user.id}))

        assert response.status_code == 200
        assert list(response.context["reviews"]) == [review]
        assert list(response.context["favorite_movies"]) == [movie]

    def test_edit_profile_without_password(self, signed_in_client, user):
        response = signed_in_client.post(reverse("accounts:edit"), {"name": "Moe", "email": user.email})

        assert response.status_code == 302
        user.refresh_from_db()
        assert user.name == "Moe"
        assert user.check_password(PASSWORD)
