import re
from decimal import Decimal

from django.conf import settings
from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
)
from django.db import models
from django.db.models import Avg, Q
from django.urls import reverse
from django.utils import timezone
from django.utils.text import slugify

HIT_THRESHOLD = Decimal('300000000')
FLOP_THRESHOLD = Decimal('50000000')

image_file_name_validator = RegexValidator(
    regex=r'\A\w+\.(gif|jpg|png)\Z',
    message='must reference a GIF, JPG, or PNG image',
    flags=re.IGNORECASE,
)


class MovieQuerySet(models.QuerySet):
    def released(self):
        return self.filter(released_on__lte=timezone.localdate()).order_by('-released_on')

    def upcoming(self):
        return self.filter(released_on__gt=timezone.localdate()).order_by('released_on')

    def hits(self):
        return self.released().filter(total_gross__gte=HIT_THRESHOLD).order_by('-total_gross')

    def flops(self):
        return (
            self.released()
            .filter(Q(total_gross__isnull=True) | Q(total_gross__lt=FLOP_THRESHOLD))
            .order_by('total_gross')
        )

    def rated(self, rating):
        return self.released().filter(rating=rating)

    def recent(self, limit=5):
        return self.released()[:limit]


class Movie(models.Model):
    RATINGS = ['G', 'PG', 'PG-13', 'R', 'NC-17']
    RATING_CHOICES = [(r, r) for r in RATINGS]

    title = models.CharField(max_length=255, unique=True)
    slug = models.SlugField(max_length=255, unique=True, blank=True, allow_unicode=True)
    description = models.TextField(validators=[MinLengthValidator(25)])
    released_on = models.DateField()
    duration = models.CharField(max_length=50)
    total_gross = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    image_file_name = models.CharField(
        max_length=255,
        blank=True,
        validators=[image_file_name_validator],
    )
    rating = models.CharField(max_length=5, choices=RATING_CHOICES, blank=True)
    fans = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through='Favorite',
        related_name='favorite_movies',
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MovieQuerySet.as_manager()

    class Meta:
        ordering = ['-released_on']

    def __str__(self):
        return self.title

    def generate_slug(self):
        if self.slug or not self.title:
            return
        # Punctuation-only titles slugify to nothing
        base = slugify(self.title, allow_unicode=True)[:240] or 'movie'
        slug, n = base, 2
        taken = Movie.objects.exclude(pk=self.pk)
        while taken.filter(slug=slug).exists():
            slug = f"{base}-{n}"
            n += 1
        self.slug = slug

    def clean(self):
        self.generate_slug()

    def save(self, *args, **kwargs):
        self.generate_slug()
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse('movies:detail', kwargs={'slug': self.slug})

    @property
    def is_flop(self):
        return self.total_gross is None or self.total_gross < FLOP_THRESHOLD

    @property
    def average_stars(self):
        return self.reviews.aggregate(avg=Avg('stars'))['avg']

    @property
    def average_stars_as_percent(self):
        avg = self.average_stars
        if avg is None:
            return 0
        return avg / 5.0 * 100


class Review(models.Model):
    STARS = [1, 2, 3, 4, 5]

    movie = models.ForeignKey(Movie, on_delete=models.CASCADE, related_name='reviews')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews')
    stars = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        choices=[(s, s) for s in STARS],
    )
    comment = models.TextField(validators=[MinLengthValidator(4)])
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.user} - {self.movie.title}: {self.stars}"

    @property
    def stars_as_percent(self):
        return self.stars / 5.0 * 100


class Favorite(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='favorites')
    movie = models.ForeignKey(Movie, on_delete=models.CASCADE, related_name='favorites')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user', 'movie'], name='unique_favorite_per_user_and_movie'),
        ]

    def __str__(self):
        return f"{self.user} - {self.movie.title}"
