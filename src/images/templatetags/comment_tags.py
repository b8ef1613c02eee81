"""Template helpers for rendering comment text."""
import re
from urllib.parse import urlencode

from django import template
from django.urls import reverse
from django.utils.html import escape, format_html
from django.utils.safestring import SafeData, mark_safe

register = template.Library()

USERNAME_PATTERN = re.compile(r'@(\w+)')
# Skip HTML entities such as &#x27; left behind by escaping.
HASHTAG_PATTERN = re.compile(r'(?<!&)#(\w+)')


def _linkify(text, pattern, build_link):
    """Replace every match of ``pattern`` with a link, escaping everything else."""
    text = '' if text is None else text
    keep = (lambda piece: piece) if isinstance(text, SafeData) else escape
    pieces = []
    last = 0
    for match in pattern.finditer(str(text)):
        pieces.append(keep(text[last:match.start()]))
        pieces.append(build_link(match))
        last = match.end()
    pieces.append(keep(text[last:]))
    return mark_safe(''.join(str(piece) for piece in pieces))


def _username_link(match):
    return format_html(
        '<a href="{}">{}</a>',
        reverse('profile', kwargs={'username': match.group(1)}),
        match.group(0),
    )


def _hashtag_link(match):
    hashtag = match.group(0)
    return format_html(
        '<a href="{}?{}">{}</a>',
        reverse('image-search'),
        urlencode({'search': hashtag}),
        hashtag,
    )


@register.filter
def link_usernames(text):
    """Link each ``@username`` to that user's profile."""
    return _linkify(text, USERNAME_PATTERN, _username_link)


@register.filter
def link_hashtags(text):
    """Link each ``#hashtag`` to a search for it."""
    return _linkify(text, HASHTAG_PATTERN, _hashtag_link)


@register.simple_tag
def comment_user_is_current_user(comment, user):
    return getattr(user, 'is_authenticated', False) and comment.user_id == user.pk
