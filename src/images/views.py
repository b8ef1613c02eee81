"""Views for sharing images, commenting on them and searching."""
import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db import transaction
from django.db.models import Q
from django.http import HttpResponseForbidden
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.decorators.http import require_POST

from .forms import CommentForm, ImageForm
from .models import Comment, Image, ImageComment, TextComment

logger = logging.getLogger(__name__)


class ImageIndexView(View):
    """All shared images"""

    def get(self, request):
        images = Image.objects.select_related('user')
        return render(request, 'images/index.html', {'images': images})


class ImageDetailView(View):
    """One image with its comments"""

    def get(self, request, image_id):
        image = get_object_or_404(Image.objects.select_related('user'), pk=image_id)
        comments = image.comments.select_related('user')
        context = {
            'image': image,
            'comments': [(comment, comment.resolve_content()) for comment in comments],
            'comment_form': CommentForm(),
        }
        return render(request, 'images/show.html', context)


class ImageCreateView(LoginRequiredMixin, View):
    """Share a new image as the current user"""

    def get(self, request):
        return render(request, 'images/form.html', {'form': ImageForm()})

    def post(self, request):
        form = ImageForm(request.POST)
        if not form.is_valid():
            return render(request, 'images/form.html', {'form': form}, status=400)
        image = form.save(commit=False)
        image.user = request.user
        image.save()
        return redirect('image-detail', image_id=image.pk)


class ImageUpdateView(LoginRequiredMixin, View):
    """Edit an image the current user owns"""

    def _get_owned_image(self, request, image_id):
        image = get_object_or_404(Image, pk=image_id)
        if image.user_id != request.user.pk:
            return image, HttpResponseForbidden('You can only edit your own images.')
        return image, None

    def get(self, request, image_id):
        image, denied = self._get_owned_image(request, image_id)
        if denied:
            return denied
        return render(request, 'images/form.html', {'form': ImageForm(instance=image), 'image': image})

    def post(self, request, image_id):
        image, denied = self._get_owned_image(request, image_id)
        if denied:
            return denied
        form = ImageForm(request.POST, instance=image)
        if not form.is_valid():
            return render(request, 'images/form.html', {'form': form, 'image': image}, status=400)
        form.save()
        return redirect('image-detail', image_id=image.pk)


@login_required
@require_POST
def delete_image(request, image_id):
    """Delete an image the current user owns"""
    image = get_object_or_404(Image, pk=image_id)
    if image.user_id != request.user.pk:
        return HttpResponseForbidden('You can only delete your own images.')
    image.delete()
    logger.info("User %s deleted image %s", request.user.pk, image_id)
    return redirect('dashboard')


def _redirect_back(request, fallback, **kwargs):
    referer = request.META.get('HTTP_REFERER', '')
    if referer and url_has_allowed_host_and_scheme(referer, allowed_hosts={request.get_host()}):
        return redirect(referer)
    return redirect(fallback, **kwargs)


@login_required
@require_POST
def create_comment(request, image_id):
    """Comment on an image as the current user"""
    image = get_object_or_404(Image, pk=image_id)
    form = CommentForm(request.POST)
    if not form.is_valid():
        messages.error(request, 'A comment needs some content.')
        return _redirect_back(request, 'image-detail', image_id=image.pk)

    with transaction.atomic():
        if form.cleaned_data['image_url']:
            content = ImageComment.objects.create(
                url=form.cleaned_data['image_url'],
                caption=form.cleaned_data['content'][:255],
            )
            kind = Comment.IMAGE
        else:
            content = TextComment.objects.create(body=form.cleaned_data['content'])
            kind = Comment.TEXT
        Comment.objects.create(image=image, user=request.user, content_kind=kind, content_id=content.pk)

    return redirect('image-detail', image_id=image.pk)


class ImageSearchView(View):
    """Search images by name, description or comment text"""

    def get(self, request):
        query = request.GET.get('search', '').strip()
        images = []

        if query:
            text_ids = TextComment.objects.filter(body__icontains=query).values_list('id', flat=True)
            commented_image_ids = Comment.text_comments(text_ids).values_list('image_id', flat=True)
            images = list(
                Image.objects.filter(
                    Q(name__icontains=query) |
                    Q(description__icontains=query) |
                    Q(pk__in=commented_image_ids)
                ).select_related('user').distinct()
            )

        context = {
            'images': images,
            'query': query,
            'results_count': len(images),
        }
        return render(request, 'images/search.html', context)
