"""Keep comment content rows in step with their comments."""
import logging

from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Comment

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=Comment)
def delete_comment_content(sender, instance, **kwargs):
    """Remove the variant row once the comment pointing at it is gone.

    Fires for cascades too, so deleting an image or a user clears the
    text and image comment rows behind its comments.
    """
    content_model = Comment.CONTENT_MODELS.get(instance.content_kind)
    if content_model is None:
        logger.warning("Comment %s has unknown content kind %r", instance.pk, instance.content_kind)
        return
    content_model.objects.filter(pk=instance.content_id).delete()
