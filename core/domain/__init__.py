"""
领域模型包。
提供实体、值对象、领域异常和仓储接口等领域驱动设计(DDD)的核心概念。
"""

# 基础类
from core.domain.base import Entity
from core.domain.value_objects import ValueObject

# 领域异常
from core.domain.exceptions import (
    DomainException,
    ValidationException,
    RepositoryException,
)

# 仓储接口
from core.domain.repositories import ReadOnlyRepository

__all__ = [
    # 基础类
    'Entity',
    'ValueObject',

    # 领域异常
    'DomainException',
    'ValidationException',
    'RepositoryException',

    # 仓储接口
    'ReadOnlyRepository',
]
