import logging

from django.contrib import messages
from django.contrib.auth import get_user_model, login
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render

from .forms import ProfileForm, SignUpForm

User = get_user_model()
logger = logging.getLogger(__name__)

def signup(request):
    if request.user.is_authenticated:
        return redirect('accounts:profile', user_id=request.user.id)
    if request.method == 'POST':
        form = SignUpForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user, backend='django.contrib.auth.backends.ModelBackend')
            logger.info("Created account %s for %s", user.id, user.email)
            messages.success(request, f'Thanks for signing up, {user.get_short_name()}!')
            return redirect('accounts:profile', user_id=user.id)
    else:
        form = SignUpForm()
    return render(request, 'accounts/signup.html', {'form': form})

def profile(request, user_id):
    profile_user = get_object_or_404(User, pk=user_id)
    reviews = profile_user.reviews.select_related('movie')
    favorite_movies = profile_user.favorite_movies.all()
    return render(request, 'accounts/profile.html', {
        'profile_user': profile_user,
        'reviews': reviews,
        'favorite_movies': favorite_movies,
    })

@login_required
def edit_profile(request):
    if request.method == 'POST':
        form = ProfileForm(request.POST, instance=request.user)
        if form.is_valid():
            user = form.save()
            messages.success(request, 'Account successfully updated!')
            return redirect('accounts:profile', user_id=user.id)
    else:
        form = ProfileForm(instance=request.user)
    return render(request, 'accounts/edit.html', {'form': form})
