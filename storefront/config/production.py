"""
生产环境配置文件。
"""
import os
from .base import *
from .env import *

DEBUG = False

DATABASES = mysql_database(CONN_MAX_AGE=60)

os.makedirs(LOG_DIR, exist_ok=True)

_ROTATING = {
    'class': 'logging.handlers.RotatingFileHandler',
    'maxBytes': 10 * 1024 * 1024,
    'backupCount': 10,
}

LOGGING = build_logging({
    'console': {
        'level': 'WARNING',
        'class': 'logging.StreamHandler',
    },
    'file': dict(_ROTATING, level='INFO', filename=LOG_DIR / 'storefront.log'),
    'error_file': dict(_ROTATING, level='ERROR', filename=LOG_DIR / 'error.log'),
})

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# 只读接口对匿名访问限流
REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] = [
    'rest_framework.throttling.AnonRateThrottle',
]
REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {
    'anon': '600/minute',
}

CATALOG_SETTINGS = catalog_settings()
