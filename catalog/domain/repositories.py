"""
商品目录领域模型中的仓储接口。
定义用于检索商品和分类的只读仓储接口。
"""
from abc import ABC, abstractmethod
from typing import List

from core.domain.repositories import ReadOnlyRepository
from catalog.domain.entities import Product
from catalog.domain.value_objects import ProductCategory, SearchQuery


class ProductRepository(ReadOnlyRepository[Product]):
    """
    商品仓储接口。
    定义用于检索商品实体的方法。
    """

    @abstractmethod
    def list(self, skip: int = 0, limit: int = 100) -> List[Product]:
        """
        获取上架商品列表，按创建时间倒序。

        Args:
            skip: 跳过的记录数
            limit: 返回的最大记录数

        Returns:
            商品列表
        """
        pass

    @abstractmethod
    def search(self, query: SearchQuery) -> List[Product]:
        """
        搜索上架商品。

        名称、描述、商品编号、分类或任一卖点包含关键词（不区分大小写）即命中，
        结果按创建时间倒序，最多返回query.limit条。

        Args:
            query: 搜索查询

        Returns:
            命中的商品列表
        """
        pass

    @abstractmethod
    def find_by_category(self, category_slug: str, limit: int = 100) -> List[Product]:
        """
        按分类别名查找上架商品。

        Args:
            category_slug: 分类别名
            limit: 返回的最大记录数

        Returns:
            商品列表
        """
        pass

    @abstractmethod
    def find_discounted(self, limit: int = 500) -> List[Product]:
        """按创建时间倒序获取原价高于售价的上架商品"""


class CategoryRepository(ABC):
    """
    分类仓储接口。
    """

    @abstractmethod
    def list_with_products(self) -> List[ProductCategory]:
        """
        获取至少关联一个商品的分类，并附带实时统计的商品数量。

        Returns:
            分类列表，不包含商品数量为0的分类
        """
        pass
