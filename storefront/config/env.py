"""
环境变量处理模块。
启动时读取 config 目录下的 .env 文件，并提供带类型转换的 get_env。
"""
import os
import warnings
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

# 项目根目录
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_FILE = Path(__file__).resolve().parent / '.env'

_TRUE_VALUES = ('true', 'yes', '1', 'y', 'on')


def load_env_file(env_path: Path = ENV_FILE) -> bool:
    """
    加载.env文件，已存在的环境变量不会被覆盖。

    Returns:
        文件存在并加载成功时返回True
    """
    if not env_path.exists():
        return False
    try:
        loaded = load_dotenv(dotenv_path=env_path, encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        warnings.warn(f"加载环境变量文件{env_path}失败: {e}，将使用默认值")
        return False
    print(f"已加载环境变量文件: {env_path}")
    return loaded


def _cast(value: str, cast_type: type) -> Any:
    if cast_type is bool:
        return value.strip().lower() in _TRUE_VALUES
    if cast_type is list:
        return [item.strip() for item in value.split(',') if item.strip()]
    return cast_type(value)


def get_env(name: str, default: Any = None, cast_type: Optional[type] = None) -> Any:
    """
    获取环境变量。

    Args:
        name: 环境变量名称
        default: 变量不存在或无法转换时的默认值，原样返回不做转换
        cast_type: 目标类型，bool 和 list 按文本规则解析

    Returns:
        转换后的值
    """
    value = os.environ.get(name)
    if value is None:
        return default
    if cast_type is None:
        return value
    try:
        return _cast(value, cast_type)
    except (ValueError, TypeError):
        warnings.warn(f"环境变量{name}的值'{value}'无法转换为{cast_type.__name__}，使用默认值{default!r}")
        return default


load_env_file()

DEBUG = get_env('DEBUG', default=True, cast_type=bool)
SECRET_KEY = get_env('SECRET_KEY', default='django-insecure-storefront-dev-key-change-me')
ALLOWED_HOSTS = get_env('ALLOWED_HOSTS', default=['localhost', '127.0.0.1'], cast_type=list)

# 数据库
DB_ENGINE = get_env('DB_ENGINE', default='django.db.backends.mysql')
DB_NAME = get_env('DB_NAME', default='storefront')
DB_USER = get_env('DB_USER', default='root')
DB_PASSWORD = get_env('DB_PASSWORD', default='')
DB_HOST = get_env('DB_HOST', default='127.0.0.1')
DB_PORT = get_env('DB_PORT', default='3306')

# 国际化
LANGUAGE_CODE = get_env('LANGUAGE_CODE', default='zh-hans')
TIME_ZONE = get_env('TIME_ZONE', default='Asia/Shanghai')

# 商品目录
SEARCH_RESULT_LIMIT = get_env('SEARCH_RESULT_LIMIT', default=20, cast_type=int)
PRODUCT_LIST_LIMIT = get_env('PRODUCT_LIST_LIMIT', default=50, cast_type=int)
DEALS_CANDIDATE_LIMIT = get_env('DEALS_CANDIDATE_LIMIT', default=500, cast_type=int)
