import random
from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.db import transaction
from movies.models import Movie, Review

User = get_user_model()

SYNTHETIC_PREFIX = "demo_user_"
SYNTHETIC_DOMAIN = "@example.com"

COMMENTS = [
    "Two thumbs up!",
    "Cool!",
    "A real crowd pleaser.",
    "Not my cup of tea.",
    "Fell asleep halfway through.",
    "Would watch again.",
]

def weighted_choice(items, weights):
    return random.choices(items, weights=weights, k=1)[0]

class Command(BaseCommand):
    help = "Seed synthetic users and reviews for local development."

    def add_arguments(self, parser):
        parser.add_argument('--users', type=int, default=20, help='Number of synthetic users to create')
        parser.add_argument('--min_reviews', type=int, default=1, help='Min reviews per synthetic user')
        parser.add_argument('--max_reviews', type=int, default=5, help='Max reviews per synthetic user')
        parser.add_argument('--seed', type=int, default=42, help='Random seed for reproducibility')
        parser.add_argument('--clear', action='store_true', help='Delete existing synthetic reviews before seeding')

    def handle(self, *args, **opts):
        random.seed(opts['seed'])

        movies = list(Movie.objects.all())
        if not movies:
            self.stderr.write("No movies found. Add some through the admin first.")
            return

        if opts['min_reviews'] > opts['max_reviews']:
            self.stderr.write("--min_reviews cannot be greater than --max_reviews")
            return

        if opts['clear']:
            self.stdout.write("Clearing synthetic reviews...")
            Review.objects.filter(user__email__startswith=SYNTHETIC_PREFIX).delete()

        self.stdout.write(f"Creating {opts['users']} synthetic users...")
        created_users = []
        with transaction.atomic():
            for i in range(opts['users']):
                email = f"{SYNTHETIC_PREFIX}{i+1:04d}{SYNTHETIC_DOMAIN}"
                user = User.objects.filter(email=email).first()
                if user is None:
                    user = User.objects.create_user(
                        email=email,
                        password="password123!",
                        name=f"Demo User {i+1}",
                    )
                created_users.append(user)

        # Higher-grossing movies are more likely to be reviewed, and reviewed well
        grosses = [float(m.total_gross or 0) for m in movies]
        top = max(grosses) or 1.0
        weights = [1.0 + g / top for g in grosses]

        reviews_to_create = []
        for user in created_users:
            n = min(random.randint(opts['min_reviews'], opts['max_reviews']), len(movies))
            sampled = set()
            while len(sampled) < n:
                sampled.add(weighted_choice(movies, weights))
            for m in sampled:
                bias = 0 if m.is_flop else 1
                stars = max(1, min(5, round(random.gauss(3 + bias, 1.0))))
                reviews_to_create.append(Review(user=user, movie=m, stars=stars, comment=random.choice(COMMENTS)))

        with transaction.atomic():
            Review.objects.bulk_create(reviews_to_create)
        self.stdout.write(self.style.SUCCESS(
            f"Done. Created {len(reviews_to_create)} reviews for {len(created_users)} users."
        ))
