"""
领域异常。

目录接口只区分两类错误：请求参数无效（ValidationException）和
数据存储失败（RepositoryException），两者都以可读消息返回给调用方。
"""
from typing import Optional


class DomainException(Exception):
    """领域异常基类，message 即返回给调用方的错误消息"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationException(DomainException):
    """
    请求参数无效。

    Args:
        field_name: 出错的参数名，为空时直接使用 message
        message: 错误描述
    """

    def __init__(self, field_name: Optional[str] = None, message: str = "数据验证失败"):
        self.field_name = field_name
        super().__init__(f"字段'{field_name}'验证失败: {message}" if field_name else message)


class RepositoryException(DomainException):
    """
    数据存储不可用或查询执行失败。
    reason 只写入日志，接口响应使用统一的内部错误消息。
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}失败: {reason}")
