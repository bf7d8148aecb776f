"""
商品目录应用服务层包。
提供目录相关的应用服务、数据传输对象、查询和内存筛选引擎。
"""

# DTO
from catalog.application.dtos import (
    ProductDTO,
    CategoryDTO,
    DealsPageDTO
)

# 筛选
from catalog.application.filtering import (
    ALL_CATEGORIES,
    FilterConfig,
    FilterMode,
    SortOption,
    apply_filters,
    category_options,
    price_ceiling
)

# 查询
from catalog.application.queries import (
    SearchProductsQuery,
    ListProductsQuery,
    GetDealsQuery
)

# 应用服务
from catalog.application.catalog_service import CatalogApplicationService

__all__ = [
    # DTO
    'ProductDTO',
    'CategoryDTO',
    'DealsPageDTO',

    # 筛选
    'ALL_CATEGORIES',
    'FilterConfig',
    'FilterMode',
    'SortOption',
    'apply_filters',
    'category_options',
    'price_ceiling',

    # 查询
    'SearchProductsQuery',
    'ListProductsQuery',
    'GetDealsQuery',

    # 应用服务
    'CatalogApplicationService',
]
