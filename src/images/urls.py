'''
Urls for images app
'''

from django.urls import path
from .views import (
    ImageIndexView,
    ImageDetailView,
    ImageCreateView,
    ImageUpdateView,
    ImageSearchView,
    delete_image,
    create_comment,
)

urlpatterns = [
    path('', ImageIndexView.as_view(), name='image-index'),
    path('new/', ImageCreateView.as_view(), name='image-new'),
    path('search/', ImageSearchView.as_view(), name='image-search'),
    path('<int:image_id>/', ImageDetailView.as_view(), name='image-detail'),
    path('<int:image_id>/edit/', ImageUpdateView.as_view(), name='image-edit'),
    path('<int:image_id>/delete/', delete_image, name='image-delete'),
    path('<int:image_id>/comments/', create_comment, name='image-comments'),
]
