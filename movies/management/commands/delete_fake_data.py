from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from movies.models import Favorite, Review

from .seed_reviews import SYNTHETIC_DOMAIN, SYNTHETIC_PREFIX

User = get_user_model()

class Command(BaseCommand):
    help = "Delete synthetic users along with their reviews and favorites"

    def handle(self, *args, **opts):
        users = User.objects.filter(email__startswith=SYNTHETIC_PREFIX, email__endswith=SYNTHETIC_DOMAIN)
        reviews_deleted = Review.objects.filter(user__in=users).count()
        favorites_deleted = Favorite.objects.filter(user__in=users).count()
        users_deleted = users.count()
        # Reviews and favorites go with their users
        users.delete()

        self.stdout.write(
            f"Deleted {reviews_deleted} reviews, {favorites_deleted} favorites and {users_deleted} users"
        )
