"""
商品目录领域模型中的实体。
包含商品实体定义。
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union

from core.domain import Entity
from catalog.domain.value_objects import CategoryRef


# 商品分类可能是分类引用、纯文本标签，或者缺失
CategoryField = Union[CategoryRef, str, None]


class Product(Entity):
    """
    商品实体。
    商品由后台维护，目录只读取它。
    """

    def __init__(
        self,
        id,
        product_id: str,
        name: str,
        price: Decimal,
        description: str = "",
        category: CategoryField = None,
        brand: str = "",
        features: Optional[List[str]] = None,
        original_price: Optional[Decimal] = None,
        images: Optional[List[str]] = None,
        rating: Decimal = Decimal("0"),
        reviews: int = 0,
        in_stock: bool = True,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        初始化商品实体。

        Args:
            id: 商品ID（不透明的唯一标识）
            product_id: 面向用户的商品编号
            name: 商品名称
            price: 售价
            description: 商品描述
            category: 分类引用、分类文本或None
            brand: 品牌
            features: 商品卖点列表，保持顺序
            original_price: 原价，仅在打折时存在
            images: 图片URL列表，保持顺序
            rating: 评分(0-5)
            reviews: 评价数量
            in_stock: 是否有货
            is_active: 是否上架
            created_at: 创建时间
            updated_at: 更新时间
        """
        super().__init__(id)
        self.product_id = product_id
        self.name = name
        self.description = description
        self.category = category
        self.brand = brand
        self.features = list(features or [])
        self.price = price
        self.original_price = original_price
        self.images = list(images or [])
        self.rating = rating
        self.reviews = reviews
        self.in_stock = in_stock
        self.is_active = is_active
        self.created_at = created_at
        self.updated_at = updated_at
