"""
商品仓储的Django实现。
"""
from typing import List

from django.db import DatabaseError
from django.db.models import F, Q
from loguru import logger

from core.domain.exceptions import RepositoryException
from catalog.domain.entities import Product, CategoryField
from catalog.domain.repositories import ProductRepository
from catalog.domain.value_objects import CategoryRef, SearchQuery
from catalog.infrastructure.models.catalog_models import (
    Category as CategoryModel,
    Product as ProductModel,
)


class DjangoProductRepository(ProductRepository):
    """
    基于Django ORM的商品仓储实现。
    """

    def _base_queryset(self):
        # 分类和卖点随商品一起加载，避免逐条查询
        return ProductModel.objects.select_related('category').prefetch_related('features')

    def _active_queryset(self):
        return self._base_queryset().filter(is_active=True)

    def list(self, skip: int = 0, limit: int = 100) -> List[Product]:
        """
        获取上架商品列表，按创建时间倒序。

        Args:
            skip: 跳过的记录数
            limit: 返回的最大记录数

        Returns:
            商品列表
        """
        queryset = self._active_queryset().order_by('-created_at')[skip:skip + limit]
        return self._fetch(queryset, "获取商品列表")

    def search(self, query: SearchQuery) -> List[Product]:
        """
        搜索上架商品。

        Args:
            query: 搜索查询

        Returns:
            命中的商品列表，按创建时间倒序
        """
        keyword = query.keyword
        condition = (
            Q(name__icontains=keyword) |
            Q(description__icontains=keyword) |
            Q(product_id__icontains=keyword) |
            # 纯文本分类只在商品没有分类引用时参与匹配
            Q(category__isnull=True, category_label__icontains=keyword) |
            Q(category__name__icontains=keyword) |
            Q(features__text__icontains=keyword)
        )
        queryset = (
            self._active_queryset()
            .filter(condition)
            .distinct()
            .order_by('-created_at')[:query.limit]
        )
        products = self._fetch(queryset, "搜索商品")
        logger.debug(f"搜索关键词 '{keyword}' 命中 {len(products)} 个商品")
        return products

    def find_by_category(self, category_slug: str, limit: int = 100) -> List[Product]:
        """
        按分类别名查找上架商品。

        Args:
            category_slug: 分类别名
            limit: 返回的最大记录数

        Returns:
            商品列表
        """
        queryset = (
            self._active_queryset()
            .filter(category__slug=category_slug)
            .order_by('-created_at')[:limit]
        )
        return self._fetch(queryset, "按分类获取商品")

    def find_discounted(self, limit: int = 500) -> List[Product]:
        """
        获取打折的上架商品（原价高于售价），按创建时间倒序。

        Args:
            limit: 返回的最大记录数

        Returns:
            商品列表
        """
        queryset = (
            self._active_queryset()
            .filter(original_price__isnull=False, original_price__gt=F('price'))
            .order_by('-created_at')[:limit]
        )
        return self._fetch(queryset, "获取特惠商品")

    def _fetch(self, queryset, operation: str) -> List[Product]:
        """
        执行查询并转换为领域实体，数据库错误统一转换为仓储异常。

        Args:
            queryset: 待执行的查询集
            operation: 操作名称，用于日志和异常消息

        Returns:
            商品列表
        """
        try:
            product_models = list(queryset)
        except DatabaseError as e:
            logger.error(f"{operation}失败: {e}")
            raise RepositoryException(operation, str(e)) from e
        return [self._to_domain_entity(model) for model in product_models]

    def _resolve_category(self, product_model: ProductModel) -> CategoryField:
        """
        解析商品的分类。

        有分类引用时解析为分类引用，引用失效时视为没有分类；
        没有分类引用时使用纯文本分类。

        Args:
            product_model: 商品数据库模型

        Returns:
            分类引用、分类文本或None
        """
        if product_model.category_id is None:
            return product_model.category_label or None

        try:
            category_model = product_model.category
        except CategoryModel.DoesNotExist:
            category_model = None

        if category_model is None:
            logger.warning(f"商品 {product_model.id} 的分类 {product_model.category_id} 不存在")
            return None

        return CategoryRef(
            id=category_model.id,
            name=category_model.name,
            slug=category_model.slug
        )

    def _to_domain_entity(self, product_model: ProductModel) -> Product:
        """
        将数据库模型转换为领域实体。

        Args:
            product_model: 商品数据库模型

        Returns:
            商品领域实体
        """
        return Product(
            id=product_model.id,
            product_id=product_model.product_id,
            name=product_model.name,
            description=product_model.description,
            category=self._resolve_category(product_model),
            brand=product_model.brand,
            features=[feature.text for feature in product_model.features.all()],
            price=product_model.price,
            original_price=product_model.original_price,
            images=product_model.images or [],
            rating=product_model.rating,
            reviews=product_model.reviews,
            in_stock=product_model.in_stock,
            is_active=product_model.is_active,
            created_at=product_model.created_at,
            updated_at=product_model.updated_at
        )
