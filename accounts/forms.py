from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.forms import UserCreationForm

User = get_user_model()

class SignUpForm(UserCreationForm):
    """Requires a password and a matching confirmation (password1/password2)."""

    class Meta:
        model = User
        fields = ('name', 'email')


class ProfileForm(forms.ModelForm):
    # No password fields: an existing account keeps its current digest.
    class Meta:
        model = User
        fields = ('name', 'email')
