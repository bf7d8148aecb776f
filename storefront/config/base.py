"""
基础配置文件。
包含所有环境共享的Django配置。
"""
from .env import BASE_DIR, LANGUAGE_CODE, TIME_ZONE

# 应用定义
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'catalog.apps.CatalogConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'storefront.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'storefront.wsgi.application'

# 国际化
USE_I18N = True
USE_TZ = True

# 静态文件
STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# DRF配置（各环境文件会覆盖渲染器等设置）
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'core.infrastructure.exception_handler.unified_exception_handler',
    'DATETIME_FORMAT': 'iso-8601',
    'COERCE_DECIMAL_TO_STRING': False,
}

LOG_DIR = BASE_DIR / 'logs'


def mysql_database(**extra):
    """按环境变量构建MySQL数据库配置，extra 覆盖或追加连接参数"""
    from .env import DB_ENGINE, DB_NAME, DB_USER, DB_PASSWORD, DB_HOST, DB_PORT

    database = {
        'ENGINE': DB_ENGINE,
        'NAME': DB_NAME,
        'USER': DB_USER,
        'PASSWORD': DB_PASSWORD,
        'HOST': DB_HOST,
        'PORT': DB_PORT,
        'OPTIONS': {
            'charset': 'utf8mb4',
            'use_unicode': True,
        },
    }
    database.update(extra)
    return {'default': database}


def build_logging(handlers, app_level='INFO', django_level='INFO'):
    """
    构建LOGGING字典配置。

    Args:
        handlers: 处理器名称到处理器配置的映射
        app_level: catalog 和 core 日志记录器的级别
        django_level: django 日志记录器的级别

    Returns:
        logging.config.dictConfig 可用的字典
    """
    names = list(handlers)
    app_logger = {'handlers': names, 'level': app_level, 'propagate': False}
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '{levelname} {asctime} {name} {process:d} {thread:d} {message}',
                'style': '{',
            },
        },
        'handlers': {
            name: dict(handler, formatter='verbose') for name, handler in handlers.items()
        },
        'loggers': {
            'django': {'handlers': names, 'level': django_level, 'propagate': True},
            'catalog': dict(app_logger),
            'core': dict(app_logger),
        },
    }


def catalog_settings():
    """商品目录模块配置，数值来自环境变量"""
    from .env import SEARCH_RESULT_LIMIT, PRODUCT_LIST_LIMIT, DEALS_CANDIDATE_LIMIT

    return {
        'SEARCH_RESULT_LIMIT': SEARCH_RESULT_LIMIT,
        'PRODUCT_LIST_LIMIT': PRODUCT_LIST_LIMIT,
        'DEALS_CANDIDATE_LIMIT': DEALS_CANDIDATE_LIMIT,
    }
