"""Development settings for AgroHire project.

Debug on, all hosts allowed, e-mails printed to the console and the
domain loggers turned up to DEBUG. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# Run notification tasks inline unless a broker is configured explicitly
CELERY_TASK_ALWAYS_EAGER = os.environ.get('CELERY_TASK_ALWAYS_EAGER', 'true').lower() == 'true'  # noqa: F405

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'DEBUG'  # noqa: F405
