import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from .forms import ReviewForm
from .models import Favorite, Movie

logger = logging.getLogger(__name__)

FILTERS = {
    'released': lambda qs: qs.released(),
    'upcoming': lambda qs: qs.upcoming(),
    'recent': lambda qs: qs.recent(),
    'hits': lambda qs: qs.hits(),
    'flops': lambda qs: qs.flops(),
}

def movie_list(request):
    active = request.GET.get('filter', 'released')
    if active not in FILTERS:
        active = 'released'
    q = request.GET.get('q', '').strip()
    rating = request.GET.get('rating')

    movies = Movie.objects.all()
    if q:
        movies = movies.filter(title__icontains=q)
    if rating in Movie.RATINGS:
        movies = movies.filter(rating=rating)
    # recent() slices, so it has to be applied last
    movies = FILTERS[active](movies)
    return render(request, 'movies/list.html', {
        'movies': movies,
        'filter': active,
        'filters': list(FILTERS),
        'q': q,
        'rating': rating,
        'ratings': Movie.RATINGS,
    })

def _detail_context(request, movie, form):
    is_favorite = False
    if request.user.is_authenticated:
        is_favorite = Favorite.objects.filter(user=request.user, movie=movie).exists()
    return {
        'movie': movie,
        'reviews': movie.reviews.select_related('user'),
        'fans': movie.fans.all(),
        'is_favorite': is_favorite,
        'form': form,
    }

def movie_detail(request, slug):
    movie = get_object_or_404(Movie, slug=slug)
    return render(request, 'movies/detail.html', _detail_context(request, movie, ReviewForm()))

@login_required
@require_POST
def create_review(request, slug):
    movie = get_object_or_404(Movie, slug=slug)
    form = ReviewForm(request.POST)
    if not form.is_valid():
        messages.error(request, 'Invalid review.')
        return render(request, 'movies/detail.html', _detail_context(request, movie, form), status=400)

    review = form.save(commit=False)
    review.movie = movie
    review.user = request.user
    review.save()
    logger.info("User %s reviewed %s with %s stars", request.user.id, movie.slug, review.stars)
    messages.success(request, f'Thanks for your review of {movie.title}!')
    return redirect(movie)

@login_required
@require_POST
def toggle_favorite(request, slug):
    movie = get_object_or_404(Movie, slug=slug)
    entry = Favorite.objects.filter(user=request.user, movie=movie).first()
    if entry:
        entry.delete()
        logger.info("User %s unfaved %s", request.user.id, movie.slug)
        messages.info(request, f'Removed {movie.title} from your favorites.')
    else:
        Favorite.objects.create(user=request.user, movie=movie)
        logger.info("User %s faved %s", request.user.id, movie.slug)
        messages.success(request, f'Added {movie.title} to your favorites.')
    return redirect(movie)
