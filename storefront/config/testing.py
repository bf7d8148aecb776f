"""
测试环境配置文件。
pytest 直接使用本模块作为 DJANGO_SETTINGS_MODULE。
"""
from .base import *
from .env import *

DEBUG = False

# 内存数据库，没有迁移文件的应用由测试框架直接建表
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# 测试时只输出错误
LOGGING = build_logging(
    {
        'console': {
            'level': 'ERROR',
            'class': 'logging.StreamHandler',
        },
    },
    app_level='ERROR',
    django_level='ERROR',
)

REST_FRAMEWORK['TEST_REQUEST_DEFAULT_FORMAT'] = 'json'

# 测试使用固定值，不受本地 .env 影响
CATALOG_SETTINGS = {
    'SEARCH_RESULT_LIMIT': 20,
    'PRODUCT_LIST_LIMIT': 50,
    'DEALS_CANDIDATE_LIMIT': 500,
}
