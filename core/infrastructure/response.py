"""
统一响应封装模块。
目录接口成功时直接返回资源数据（JSON数组或对象），
失败时只返回带有可读消息的 {"error": "..."} 对象，不附带业务状态码。
"""
import typing as t
from dataclasses import dataclass

from rest_framework import status as http_status
from rest_framework.response import Response


class ErrorKind:
    """错误类别定义"""
    INVALID_REQUEST = 'invalid-request'  # 缺少必要参数或参数非法
    INTERNAL_ERROR = 'internal-error'    # 数据存储不可用或其他意外错误


# 错误类别对应的HTTP状态码
ERROR_HTTP_STATUS = {
    ErrorKind.INVALID_REQUEST: http_status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL_ERROR: http_status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# 错误类别对应的默认消息
ERROR_MESSAGE_MAPPING = {
    ErrorKind.INVALID_REQUEST: "请求参数错误",
    ErrorKind.INTERNAL_ERROR: "服务器内部错误",
}


@dataclass(frozen=True)
class ErrorResponse:
    """错误响应数据结构"""
    kind: str
    message: str

    @property
    def http_status(self) -> int:
        return ERROR_HTTP_STATUS.get(self.kind, http_status.HTTP_500_INTERNAL_SERVER_ERROR)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {"error": self.message}


class ApiResponseBuilder:
    """API响应构建器"""

    @staticmethod
    def success(data: t.Any) -> Response:
        """
        创建成功响应

        Args:
            data: 已序列化的响应数据

        Returns:
            Response: DRF响应对象
        """
        return Response(data, status=http_status.HTTP_200_OK)

    @staticmethod
    def fail(kind: str = ErrorKind.INTERNAL_ERROR, message: t.Optional[str] = None) -> Response:
        """
        创建失败响应

        Args:
            kind: 错误类别
            message: 错误消息，为空时使用类别的默认消息

        Returns:
            Response: DRF响应对象
        """
        error = ErrorResponse(kind=kind, message=message or get_error_message(kind))
        return Response(error.to_dict(), status=error.http_status)


def get_error_message(kind: str) -> str:
    """
    根据错误类别获取对应的默认消息

    Args:
        kind: 错误类别

    Returns:
        str: 错误消息
    """
    return ERROR_MESSAGE_MAPPING.get(kind, "未知错误")
