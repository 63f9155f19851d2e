"""
Django settings for exercising the sluggable app.
"""

import os, environ
from pathlib import Path

env = environ.Env()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent

env_file = os.path.join(BASE_DIR, '.env')
if os.path.isfile(env_file):
    environ.Env.read_env(env_file, overwrite=True)

SECRET_KEY = env('SECRET_KEY', default='sluggable-insecure-test-key')

DEBUG = env.bool('DEBUG', default=False)

ALLOWED_HOSTS = env('ALLOWED_HOSTS', default='').split(',')

# Application definition

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'sluggable',
    'testapp',
]


DATABASES = {
    'default': env.db('DATABASE_URL', default='sqlite://:memory:')
}

CACHES = {
    'default': env.cache_url('CACHE_URL', default='locmemcache://'),
}


# process-wide defaults, overridden per model by its `sluggable` dict
SLUGGABLE = env.json('SLUGGABLE', default={})


LANGUAGE_CODE = 'en-us'

USE_I18N = True

TIME_ZONE = 'UTC'
USE_TZ = True


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
        },
        'sluggable': {
            'handlers': ['console'],
            'level': env('SLUGGABLE_LOG_LEVEL', default='INFO'),
        },
    }
}


DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
