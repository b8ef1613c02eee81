"""Forms for creating listings and making offers."""
from django import forms

from .models import Listing, Offer


class ListingForm(forms.ModelForm):
    class Meta:
        model = Listing
        fields = ['name', 'description']


class OfferForm(forms.ModelForm):
    class Meta:
        model = Offer
        fields = ['amount', 'message']

    def clean_amount(self):
        amount = self.cleaned_data['amount']
        if amount <= 0:
            raise forms.ValidationError('Offer amount must be positive.')
        return amount
