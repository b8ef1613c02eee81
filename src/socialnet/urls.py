"""
URL configuration for socialnet project.
"""
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path, include
from social.views import FeedView
from .views import HomeView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', HomeView.as_view(), name='home'),
    path('feed/', FeedView.as_view(), name='dashboard'),
    path('accounts/login/', auth_views.LoginView.as_view(), name='login'),
    path('accounts/logout/', auth_views.LogoutView.as_view(), name='logout'),
    path('accounts/', include('accounts.urls')),
    path('users/', include('social.urls')),
    path('images/', include('images.urls')),
    path('', include('listings.urls')),
]
