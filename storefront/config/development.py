"""
开发环境配置文件。
"""
import os
from .base import *
from .env import *

DEBUG = True

# 开发环境不启用HTTPS相关设置
SECURE_SSL_REDIRECT = False
SECURE_PROXY_SSL_HEADER = None
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_HSTS_SECONDS = 0

DATABASES = mysql_database()

os.makedirs(LOG_DIR, exist_ok=True)

LOGGING = build_logging(
    {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
        },
        'file': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': LOG_DIR / 'storefront.log',
        },
    },
    app_level='DEBUG',
)

# 开发时可以直接在浏览器里查看接口
REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = [
    'rest_framework.renderers.JSONRenderer',
    'rest_framework.renderers.BrowsableAPIRenderer',
]

CATALOG_SETTINGS = catalog_settings()
