'''
Config for listings app
'''

from django.apps import AppConfig

class ListingsConfig(AppConfig):
    """Listings and offers"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'listings'
