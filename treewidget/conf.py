"""Settings for treewidget, read from the ``TREEWIDGET`` dict in settings."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS = {
    'ARIA_LABEL': 'Tree navigation',
    'CSS_CLASS': 'tree',
    'VALIDATE_IDS': True,
}


def get_setting(name):
    """
    Returns the configured value for ``name``, falling back to the default.

    Settings are read on every call so ``override_settings`` works in tests.
    """
    user_settings = getattr(settings, 'TREEWIDGET', None) or {}
    unknown = set(user_settings) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            'Unknown TREEWIDGET setting(s): %s' % ', '.join(sorted(unknown)))
    return user_settings.get(name, DEFAULTS[name])
