"""Forms for sharing images and commenting on them."""
from django import forms

from .models import Image


class ImageForm(forms.ModelForm):
    class Meta:
        model = Image
        fields = ['name', 'description', 'url']


class CommentForm(forms.Form):
    """A text comment, or an image comment when ``image_url`` is given."""
    content = forms.CharField(widget=forms.Textarea, required=False)
    image_url = forms.URLField(required=False, max_length=500)

    def clean(self):
        cleaned = super().clean()
        content = (cleaned.get('content') or '').strip()
        if not content and not cleaned.get('image_url'):
            raise forms.ValidationError('A comment needs some content.')
        cleaned['content'] = content
        return cleaned
