"""
storefront 项目的配置入口。

按 DJANGO_ENV 选择 storefront.config 下的环境配置：
development（默认）、production、testing。
"""
import os

DJANGO_ENV = os.environ.get('DJANGO_ENV', 'development')

if DJANGO_ENV == 'production':
    from .config.production import *
elif DJANGO_ENV == 'testing':
    from .config.testing import *
else:
    from .config.development import *

print(f"使用{DJANGO_ENV}环境配置")
