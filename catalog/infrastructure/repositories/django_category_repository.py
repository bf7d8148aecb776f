"""
基于Django ORM的分类仓储实现。
实现领域仓储接口，处理数据库模型与领域对象之间的转换。
"""
from typing import List

from django.db import DatabaseError
from django.db.models import Count
from loguru import logger

from core.domain.exceptions import RepositoryException
from catalog.domain.repositories import CategoryRepository
from catalog.domain.value_objects import ProductCategory
from catalog.infrastructure.models.catalog_models import Category as CategoryModel


class DjangoCategoryRepository(CategoryRepository):
    """
    基于Django ORM的分类仓储实现。
    """

    def list_with_products(self) -> List[ProductCategory]:
        """
        获取至少关联一个商品的分类。

        商品数量在查询时按当前关联关系聚合，不做缓存。

        Returns:
            分类列表
        """
        queryset = (
            CategoryModel.objects
            .annotate(product_count=Count('products'))
            .filter(product_count__gt=0)
            .order_by('name')
        )
        try:
            category_models = list(queryset)
        except DatabaseError as e:
            logger.error(f"获取分类列表失败: {e}")
            raise RepositoryException("获取分类列表", str(e)) from e

        logger.debug(f"共有 {len(category_models)} 个分类包含商品")
        return [self._to_domain_object(model) for model in category_models]

    def _to_domain_object(self, category_model: CategoryModel) -> ProductCategory:
        """
        将数据库模型转换为领域值对象。

        Args:
            category_model: 带有product_count注解的分类数据库模型

        Returns:
            分类值对象
        """
        return ProductCategory(
            id=category_model.id,
            name=category_model.name,
            slug=category_model.slug,
            image=category_model.image,
            display_image=category_model.display_image,
            product_count=category_model.product_count
        )
