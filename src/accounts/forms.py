"""Registration form with the user's location fields inline."""
from django import forms
from django.contrib.auth.forms import UserCreationForm
from django.db import transaction

from .models import Location, User


class SignUpForm(UserCreationForm):
    city = forms.CharField(max_length=128)
    state = forms.CharField(max_length=64)

    class Meta(UserCreationForm.Meta):
        model = User
        fields = ('username', 'email', 'bio', 'avatar', 'number')

    @transaction.atomic
    def save(self, commit=True):
        user = super().save(commit=False)
        user.location = Location.objects.create(
            city=self.cleaned_data['city'],
            state=self.cleaned_data['state'],
        )
        if commit:
            user.save()
        return user
