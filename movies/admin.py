from django.contrib import admin
from .models import Favorite, Movie, Review

class ReviewInline(admin.TabularInline):
    model = Review
    extra = 0

@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    list_display = ('title', 'rating', 'released_on', 'total_gross')
    search_fields = ('title',)
    list_filter = ('rating',)
    prepopulated_fields = {'slug': ('title',)}
    inlines = [ReviewInline]

@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('movie', 'user', 'stars', 'created_at')
    list_filter = ('stars',)

admin.site.register(Favorite)
