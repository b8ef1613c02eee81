"""
Django bootstrap for running the socialnet tests with pytest.

pytest-django normally reads the settings module from pyproject.toml; this
covers invocations that bypass it, such as running a single test file from
an editor.
"""

import logging
import os
import sys
from pathlib import Path

import django
from django.conf import settings

LOGGER = logging.getLogger(__name__)
SRC_ROOT = Path(__file__).resolve().parent
SETTINGS_MODULE = 'socialnet.settings'

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

os.environ.setdefault('DJANGO_SETTINGS_MODULE', SETTINGS_MODULE)

if not settings.configured:
    django.setup()
    LOGGER.info("Django configured with %s", os.environ['DJANGO_SETTINGS_MODULE'])
