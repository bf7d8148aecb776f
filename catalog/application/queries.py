"""
商品目录应用服务层的查询对象。
定义用于查询目录数据的查询。
"""
from datetime import datetime
from typing import Optional

from catalog.application.filtering import FilterConfig


class SearchProductsQuery:
    """搜索商品的查询"""

    def __init__(self, keyword: Optional[str], limit: Optional[int] = None):
        """
        初始化搜索商品查询。

        Args:
            keyword: 搜索关键词，缺失或为空白时由应用服务拒绝
            limit: 返回的最大记录数，默认取配置值
        """
        from catalog.domain.config import SEARCH_RESULT_LIMIT

        self.keyword = keyword
        self.limit = SEARCH_RESULT_LIMIT if limit is None else min(SEARCH_RESULT_LIMIT, max(1, limit))


class ListProductsQuery:
    """获取商品列表的查询"""

    def __init__(self, category_slug: Optional[str] = None, limit: Optional[int] = None):
        """
        初始化商品列表查询。

        Args:
            category_slug: 分类别名过滤
            limit: 返回的最大记录数
        """
        from catalog.domain.config import PRODUCT_LIST_LIMIT, PRODUCT_LIST_MAX_LIMIT

        self.category_slug = category_slug or None
        self.limit = PRODUCT_LIST_LIMIT if limit is None else min(PRODUCT_LIST_MAX_LIMIT, max(1, limit))


class GetDealsQuery:
    """获取特惠页面数据的查询"""

    def __init__(self, filters: Optional[FilterConfig] = None, now: Optional[datetime] = None):
        """
        初始化特惠页面查询。

        Args:
            filters: 特惠筛选条件，默认使用特惠页面的默认条件
            now: 当前本地时间，用于计算倒计时
        """
        self.filters = filters or FilterConfig.deals_defaults()
        self.now = now
