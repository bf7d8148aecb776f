"""
商品目录基础设施层工厂。
负责创建和管理基础设施层对象，包括仓储实例。
"""
from catalog.domain import ProductRepository, CategoryRepository
from catalog.infrastructure.repositories.django_product_repository import DjangoProductRepository
from catalog.infrastructure.repositories.django_category_repository import DjangoCategoryRepository


class CatalogInfrastructureFactory:
    """
    商品目录基础设施层工厂类。
    同一个工厂实例只创建一次仓储，后续调用返回同一实例。
    """

    def __init__(self):
        self._product_repository = None
        self._category_repository = None

    def create_product_repository(self) -> ProductRepository:
        """
        创建商品仓储。

        Returns:
            商品仓储实例
        """
        if not self._product_repository:
            self._product_repository = DjangoProductRepository()

        return self._product_repository

    def create_category_repository(self) -> CategoryRepository:
        """
        创建分类仓储。

        Returns:
            分类仓储实例
        """
        if not self._category_repository:
            self._category_repository = DjangoCategoryRepository()

        return self._category_repository
