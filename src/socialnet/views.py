"""Views for the main landing page"""
from django.shortcuts import redirect, render
from django.views import View

from images.models import Image


class HomeView(View):
    """Display the main landing page"""

    def get(self, request):
        if request.user.is_authenticated:
            return redirect('dashboard')

        recent_images = Image.objects.select_related('user')[:12]
        return render(request, 'index.html', {'images': recent_images})
