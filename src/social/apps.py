'''
Config for social app
'''

from django.apps import AppConfig

class SocialConfig(AppConfig):
    """Follow relationships between users"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'social'
