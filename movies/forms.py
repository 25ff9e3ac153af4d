from django import forms
from .models import Review

class ReviewForm(forms.ModelForm):
    class Meta:
        model = Review
        fields = ('stars', 'comment')
        widgets = {
            'stars': forms.RadioSelect,
            'comment': forms.Textarea(attrs={'rows': 4}),
        }
