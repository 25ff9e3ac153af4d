from datetime import timedelta

from django.utils import timezone

PASSWORD = "Xylophone-42-lamp"


def days_from_today(days):
    return timezone.localdate() + timedelta(days=days)


def movie_attributes(**overrides):
    attrs = {
        "title": "Iron Man",
        "description": "Tony Stark builds an armored suit to fight the throes of evil",
        "rating": "PG-13",
        "released_on": days_from_today(-365),
        "total_gross": 318_412_101,
        "duration": "126 min",
        "image_file_name": "ironman.jpg",
    }
    attrs.update(overrides)
    return attrs


def user_attributes(**overrides):
    attrs = {
        "name": "Example User",
        "email": "user@example.com",
        "password": PASSWORD,
    }
    attrs.update(overrides)
    return attrs


def review_attributes(**overrides):
    attrs = {
        "stars": 3,
        "comment": "I laughed, I cried, I spilled my popcorn!",
    }
    attrs.update(overrides)
    return attrs
