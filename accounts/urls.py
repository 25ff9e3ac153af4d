from django.urls import path
from . import views

app_name = 'accounts'
urlpatterns = [
    path('signup/', views.signup, name='signup'),
    path('users/<int:user_id>/', views.profile, name='profile'),
    path('profile/edit/', views.edit_profile, name='edit'),
]
