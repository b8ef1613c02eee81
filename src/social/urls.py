'''
Urls for social app
'''

from django.urls import path
from .views import (
    ProfileView,
    follow_user,
    unfollow_user,
    following_list,
    followers_list,
)

urlpatterns = [
    path('<int:user_id>/follow/', follow_user, name='follow'),
    path('<int:user_id>/unfollow/', unfollow_user, name='unfollow'),
    path('<int:user_id>/following/', following_list, name='following-list'),
    path('<int:user_id>/followers/', followers_list, name='followers-list'),
    path('<str:username>/', ProfileView.as_view(), name='profile'),
]
