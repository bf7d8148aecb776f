"""
商品目录应用服务。
定义目录相关的应用层服务，处理查询，协调领域层和基础设施层。
"""
from typing import List

from django.utils import timezone
from loguru import logger

from core.domain.exceptions import ValidationException
from catalog.domain.repositories import ProductRepository, CategoryRepository
from catalog.domain.services import end_of_day, remaining_time
from catalog.domain.value_objects import SearchQuery
from catalog.application.dtos import ProductDTO, CategoryDTO, DealsPageDTO
from catalog.application.filtering import (
    FilterMode,
    apply_filters,
    category_options,
    eligible_candidates,
)
from catalog.application.queries import (
    SearchProductsQuery,
    ListProductsQuery,
    GetDealsQuery,
)


class CatalogApplicationService:
    """
    商品目录应用服务。
    只读，每次调用执行一次查询，不缓存结果。
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository
    ):
        """
        初始化商品目录应用服务。

        Args:
            product_repository: 商品仓储
            category_repository: 分类仓储
        """
        self.product_repository = product_repository
        self.category_repository = category_repository

    def search_products(self, query: SearchProductsQuery) -> List[ProductDTO]:
        """
        搜索商品。

        Args:
            query: 搜索商品查询

        Returns:
            命中的商品DTO列表，按创建时间倒序

        Raises:
            ValidationException: 关键词缺失或为空白，此时不执行任何查询
            RepositoryException: 数据存储不可用
        """
        search_query = SearchQuery(query.keyword, limit=query.limit)
        products = self.product_repository.search(search_query)
        logger.info(f"搜索 '{search_query.keyword}' 返回 {len(products)} 个商品")
        return [ProductDTO.from_entity(product) for product in products]

    def list_products(self, query: ListProductsQuery) -> List[ProductDTO]:
        """
        获取上架商品列表。

        Args:
            query: 商品列表查询

        Returns:
            商品DTO列表，按创建时间倒序
        """
        if query.category_slug:
            products = self.product_repository.find_by_category(query.category_slug, limit=query.limit)
        else:
            products = self.product_repository.list(skip=0, limit=query.limit)
        return [ProductDTO.from_entity(product) for product in products]

    def list_categories(self) -> List[CategoryDTO]:
        """
        获取包含商品的分类列表。

        Returns:
            分类DTO列表，每个分类都附带实时统计的商品数量
        """
        categories = self.category_repository.list_with_products()
        return [CategoryDTO.from_domain(category) for category in categories]

    def get_deals(self, query: GetDealsQuery) -> DealsPageDTO:
        """
        获取特惠页面数据。

        在数据库中只取出打折的上架商品（最多 DEALS_CANDIDATE_LIMIT 个最新商品），
        再按筛选条件在内存中筛选和排序。分类选项来自筛选前的全部特惠商品。

        Args:
            query: 特惠页面查询

        Returns:
            特惠页面DTO
        """
        from catalog.domain.config import DEALS_CANDIDATE_LIMIT

        if query.filters.mode != FilterMode.DEALS:
            raise ValidationException("mode", "特惠页面只支持折扣筛选模式")

        products = self.product_repository.find_discounted(limit=DEALS_CANDIDATE_LIMIT)
        candidates = [ProductDTO.from_entity(product) for product in products]
        deals = eligible_candidates(candidates, FilterMode.DEALS)

        now = query.now or timezone.localtime()
        countdown = remaining_time(end_of_day(now), now)

        items = apply_filters(deals, query.filters)
        logger.debug(f"特惠商品 {len(deals)} 个，筛选后 {len(items)} 个")

        return DealsPageDTO(
            items=items,
            categories=category_options(deals, FilterMode.DEALS),
            total_deals=len(deals),
            countdown=countdown,
            filters=query.filters.to_dict()
        )
