"""
Django settings for testing treewidget
"""

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}
SECRET_KEY = '7r33w1dg37'

INSTALLED_APPS = [
    'treewidget',
    'tests',
]

MIDDLEWARE = []

ROOT_URLCONF = 'tests.urls'

USE_TZ = True

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'loggers': {
        'treewidget': {'handlers': ['console'], 'level': 'WARNING'},
    },
}
