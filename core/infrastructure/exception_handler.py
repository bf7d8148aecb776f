"""
统一异常处理器。
提供全局异常处理机制，将视图中未捕获的异常转换为 {"error": "..."} 格式的响应。
"""
import logging
import traceback

from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    DomainException,
    RepositoryException,
    ValidationException,
)
from core.infrastructure.response import ApiResponseBuilder, ErrorKind

logger = logging.getLogger(__name__)


def detail_to_message(detail) -> str:
    """将DRF异常的detail展开为一条可读消息"""
    if isinstance(detail, dict):
        return "; ".join(f"{key}: {detail_to_message(value)}" for key, value in detail.items())
    if isinstance(detail, (list, tuple)):
        return "; ".join(detail_to_message(item) for item in detail)
    return str(detail)


def unified_exception_handler(exc, context):
    """
    统一异常处理器，将各种异常转换为统一的错误响应格式。

    Args:
        exc: 异常对象
        context: 异常上下文

    Returns:
        Response: {"error": "..."} 格式的API响应
    """
    # 首先尝试使用DRF的默认处理器（处理Http404、PermissionDenied和APIException）
    response = exception_handler(exc, context)

    request = context.get('request')
    if request is not None:
        logger.error(
            f"处理请求时发生异常: {request.method} {request.path}\n"
            f"异常类型: {exc.__class__.__name__}\n"
            f"异常信息: {str(exc)}"
        )

    if response is not None:
        detail = exc.detail if isinstance(exc, APIException) else response.data.get('detail', str(exc))
        response.data = {'error': detail_to_message(detail)}
        return response

    # 1. 无效请求
    if isinstance(exc, ValidationException):
        return ApiResponseBuilder.fail(kind=ErrorKind.INVALID_REQUEST, message=str(exc))

    # 2. 数据存储错误，不向调用方暴露内部细节
    elif isinstance(exc, RepositoryException):
        return ApiResponseBuilder.fail(kind=ErrorKind.INTERNAL_ERROR)

    elif isinstance(exc, DomainException):
        return ApiResponseBuilder.fail(kind=ErrorKind.INVALID_REQUEST, message=str(exc))

    # 3. 其他未预期的异常
    logger.error(f"未处理的异常: {exc.__class__.__name__} - {str(exc)}\n{traceback.format_exc()}")
    return ApiResponseBuilder.fail(kind=ErrorKind.INTERNAL_ERROR)
