"""
商品目录领域模型包。
提供商品实体、值对象、仓储接口和领域服务。
"""

# 实体
from catalog.domain.entities import Product

# 值对象
from catalog.domain.value_objects import CategoryRef, ProductCategory, SearchQuery, CountdownParts

# 仓储接口
from catalog.domain.repositories import ProductRepository, CategoryRepository

# 领域服务
from catalog.domain.services import calculate_discount, has_discount, end_of_day, remaining_time

__all__ = [
    # 实体
    'Product',

    # 值对象
    'CategoryRef',
    'ProductCategory',
    'SearchQuery',
    'CountdownParts',

    # 仓储接口
    'ProductRepository',
    'CategoryRepository',

    # 领域服务
    'calculate_discount',
    'has_discount',
    'end_of_day',
    'remaining_time',
]
