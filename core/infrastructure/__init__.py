"""
基础设施层包。
提供统一响应、API视图基类和全局异常处理等基础设施组件。
"""

# 统一响应
from core.infrastructure.response import (
    ApiResponseBuilder,
    ErrorKind,
    ErrorResponse,
)

# API视图基类
from core.infrastructure.api_view import ApiBaseView

__all__ = [
    # 统一响应
    'ApiResponseBuilder',
    'ErrorKind',
    'ErrorResponse',

    # API视图基类
    'ApiBaseView',
]
