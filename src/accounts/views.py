"""Views for registering new users"""
import logging

from django.contrib.auth import login
from django.shortcuts import redirect, render
from django.views import View

from .forms import SignUpForm

logger = logging.getLogger(__name__)


class SignUpView(View):
    """Register a user and sign them in"""

    def get(self, request):
        if request.user.is_authenticated:
            return redirect('dashboard')
        return render(request, 'accounts/signup.html', {'form': SignUpForm()})

    def post(self, request):
        form = SignUpForm(request.POST)
        if not form.is_valid():
            return render(request, 'accounts/signup.html', {'form': form}, status=400)

        user = form.save()
        login(request, user)
        logger.info("Registered user %s (%s)", user.pk, user.username)
        return redirect('dashboard')
