"""Views for following users, profiles and the feed."""
from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.paginator import Paginator
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views import View
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from images.models import Image
from .exceptions import NotFound, PersistenceFailure, SelfFollowError
from .services.social_graph import default_social_graph

logger = logging.getLogger(__name__)

User = get_user_model()


def _wants_json(request) -> bool:
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def _follow_response(request, graph, target, *, error: str | None = None, status: int = 200):
    """JSON for AJAX callers, otherwise a redirect back to the target's profile."""
    if _wants_json(request):
        if error:
            return JsonResponse({'error': error}, status=status)
        return JsonResponse({
            'success': True,
            'following': graph.is_following(request.user, target),
            'followers_count': graph.follower_count(target),
        })

    if error:
        messages.error(request, error)
    return redirect('profile', username=target.username)


def _follow(request, graph, target):
    try:
        graph.follow(request.user, target)
    except SelfFollowError:
        return _follow_response(request, graph, target, error='Cannot follow yourself', status=400)
    except PersistenceFailure as exc:
        logger.warning("Follow %s -> %s failed: %s", request.user.pk, target.pk, exc)
        return _follow_response(
            request, graph, target, error='Database error occurred', status=500
        )
    except NotFound as exc:
        raise Http404(str(exc)) from exc
    return _follow_response(request, graph, target)


def _unfollow(request, graph, target):
    try:
        graph.unfollow(request.user, target)
    except PersistenceFailure as exc:
        logger.warning("Unfollow %s -> %s failed: %s", request.user.pk, target.pk, exc)
        return _follow_response(
            request, graph, target, error='Database error occurred', status=500
        )
    except NotFound as exc:
        raise Http404(str(exc)) from exc
    return _follow_response(request, graph, target)


@login_required
@require_http_methods(["POST", "DELETE"])
def follow_user(request, user_id):
    """POST follows the user, DELETE unfollows them."""
    target = get_object_or_404(User, pk=user_id)
    graph = default_social_graph()
    if request.method == 'DELETE':
        return _unfollow(request, graph, target)
    return _follow(request, graph, target)


@login_required
@require_POST
def unfollow_user(request, user_id):
    """Form-friendly unfollow for browsers that cannot send DELETE."""
    target = get_object_or_404(User, pk=user_id)
    return _unfollow(request, default_social_graph(), target)


def _user_summary(user) -> dict:
    return {
        'user_id': user.pk,
        'username': user.username,
        'avatar': user.avatar,
    }


@require_GET
def following_list(request, user_id):
    """Users the given user follows, in the order they were followed."""
    user = get_object_or_404(User, pk=user_id)
    following = [_user_summary(followed) for followed in default_social_graph().followed_users(user)]
    return JsonResponse({'following': following, 'count': len(following)})


@require_GET
def followers_list(request, user_id):
    """Users following the given user."""
    user = get_object_or_404(User, pk=user_id)
    followers = [_user_summary(follower) for follower in default_social_graph().followers(user)]
    return JsonResponse({'followers': followers, 'count': len(followers)})


class ProfileView(View):
    """Display a user's profile, images and follow state"""

    def get(self, request, username):
        profile_user = get_object_or_404(User.objects.select_related('location'), username=username)
        graph = default_social_graph()

        is_following = False
        if request.user.is_authenticated and request.user.pk != profile_user.pk:
            is_following = graph.is_following(request.user, profile_user)

        context = {
            'profile_user': profile_user,
            'images': Image.objects.filter(user=profile_user),
            'followed_users': graph.followed_users(profile_user),
            'followers': graph.followers(profile_user),
            'is_following': is_following,
            'is_self': request.user.is_authenticated and request.user.pk == profile_user.pk,
        }
        return render(request, 'social/profile.html', context)


class FeedView(LoginRequiredMixin, View):
    """Images posted by the current user and everyone they follow"""

    def get(self, request):
        scope = default_social_graph().includes_myself(request.user)
        images = Image.objects.filter(user_id__in=scope).select_related('user')

        page_size = getattr(settings, 'SOCIALNET_FEED_PAGE_SIZE', 20)
        page = Paginator(images, page_size).get_page(request.GET.get('page'))

        context = {
            'page_obj': page,
            'images': page.object_list,
            'feed_scope': scope,
        }
        return render(request, 'social/feed.html', context)
