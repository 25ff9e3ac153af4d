from django.urls import path, re_path
from . import views

app_name = 'movies'
# Slugs may be unicode, which the <slug:> converter rejects
urlpatterns = [
    path('', views.movie_list, name='list'),
    re_path(r'^(?P<slug>[-\w]+)/$', views.movie_detail, name='detail'),
    re_path(r'^(?P<slug>[-\w]+)/reviews/$', views.create_review, name='review'),
    re_path(r'^(?P<slug>[-\w]+)/favorite/$', views.toggle_favorite, name='favorite'),
]
