from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .forms import SignUpForm
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    add_form = SignUpForm
    ordering = ('name',)
    list_display = ('name', 'email', 'is_staff', 'date_joined')
    search_fields = ('name', 'email')
    fieldsets = (
        (None, {'fields': ('name', 'email', 'password')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {'classes': ('wide',), 'fields': ('name', 'email', 'password1', 'password2')}),
    )
