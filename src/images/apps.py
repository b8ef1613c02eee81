'''
Config for images app
'''

from django.apps import AppConfig

class ImagesConfig(AppConfig):
    """Image uploads and their comments"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'images'

    def ready(self):
        from . import signals  # noqa: F401
