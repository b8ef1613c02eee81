'''
Config for accounts app
'''

from django.apps import AppConfig

class AccountsConfig(AppConfig):
    """Accounts app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'accounts'
