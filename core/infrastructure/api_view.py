"""
API视图基类。
提供统一的API视图类，用于规范API响应格式和处理通用逻辑。
"""
from rest_framework.views import APIView

from core.infrastructure.response import ApiResponseBuilder, ErrorKind


class ApiBaseView(APIView):
    """API视图基类，提供统一的响应方法"""

    def success_response(self, data):
        """
        成功响应

        Args:
            data: 已序列化的响应数据

        Returns:
            Response: 直接携带数据的响应
        """
        return ApiResponseBuilder.success(data)

    def invalid_request_response(self, message=None):
        """
        无效请求响应（HTTP 400）

        Args:
            message: 错误消息

        Returns:
            Response: {"error": message}
        """
        return ApiResponseBuilder.fail(kind=ErrorKind.INVALID_REQUEST, message=message)

    def internal_error_response(self, message=None):
        """
        服务器内部错误响应（HTTP 500）

        Args:
            message: 错误消息

        Returns:
            Response: {"error": message}
        """
        return ApiResponseBuilder.fail(kind=ErrorKind.INTERNAL_ERROR, message=message)
