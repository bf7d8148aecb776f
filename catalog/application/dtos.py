"""
商品目录应用服务层的数据传输对象(DTOs)。
定义应用服务与外部通信使用的数据结构。
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from django.utils.dateparse import parse_datetime

from catalog.domain.entities import Product
from catalog.domain.value_objects import CategoryRef, CountdownParts, ProductCategory


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _to_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return parse_datetime(value)


class ProductDTO:
    """商品数据传输对象，用于返回和在客户端保存商品信息"""

    def __init__(
        self,
        id: str,
        product_id: str,
        name: str,
        description: str,
        category: Union[CategoryRef, str, None],
        brand: str,
        features: List[str],
        price: Decimal,
        original_price: Optional[Decimal],
        images: List[str],
        rating: Decimal,
        reviews: int,
        in_stock: bool,
        is_active: bool,
        created_at: Optional[datetime],
        updated_at: Optional[datetime]
    ):
        """
        初始化商品DTO。

        Args:
            id: 商品ID
            product_id: 商品编号
            name: 商品名称
            description: 商品描述
            category: 分类引用、分类文本或None
            brand: 品牌
            features: 卖点列表
            price: 售价
            original_price: 原价，未打折时为None
            images: 图片URL列表
            rating: 评分
            reviews: 评价数量
            in_stock: 是否有货
            is_active: 是否上架
            created_at: 创建时间
            updated_at: 更新时间
        """
        self.id = id
        self.product_id = product_id
        self.name = name
        self.description = description
        self.category = category
        self.brand = brand
        self.features = features
        self.price = price
        self.original_price = original_price
        self.images = images
        self.rating = rating
        self.reviews = reviews
        self.in_stock = in_stock
        self.is_active = is_active
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def category_name(self) -> Optional[str]:
        """解析后的分类名称，分类引用取其名称"""
        if isinstance(self.category, CategoryRef):
            return self.category.name
        return self.category or None

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """
        从商品实体创建DTO。

        Args:
            product: 商品领域实体

        Returns:
            商品DTO
        """
        return cls(
            id=str(product.id),
            product_id=product.product_id,
            name=product.name,
            description=product.description,
            category=product.category,
            brand=product.brand,
            features=list(product.features),
            price=product.price,
            original_price=product.original_price,
            images=list(product.images),
            rating=product.rating,
            reviews=product.reviews,
            in_stock=product.in_stock,
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductDTO':
        """
        从接口返回的JSON对象创建DTO。

        Args:
            data: 商品JSON对象（驼峰字段名）

        Returns:
            商品DTO
        """
        category = data.get('category')
        if isinstance(category, dict):
            category = CategoryRef(
                id=category.get('_id'),
                name=category.get('name'),
                slug=category.get('slug')
            )

        return cls(
            id=str(data.get('_id')),
            product_id=data.get('productId', ''),
            name=data.get('name', ''),
            description=data.get('description', ''),
            category=category or None,
            brand=data.get('brand', ''),
            features=list(data.get('features') or []),
            price=_to_decimal(data.get('price', 0)),
            original_price=_to_decimal(data.get('originalPrice')),
            images=list(data.get('images') or []),
            rating=_to_decimal(data.get('rating', 0)),
            reviews=int(data.get('reviews', 0)),
            in_stock=bool(data.get('inStock', False)),
            is_active=bool(data.get('isActive', True)),
            created_at=_to_datetime(data.get('createdAt')),
            updated_at=_to_datetime(data.get('updatedAt'))
        )

    def __repr__(self) -> str:
        return f"ProductDTO({self.product_id!r}, {self.name!r})"


class CategoryDTO:
    """分类数据传输对象"""

    def __init__(
        self,
        id: str,
        name: str,
        slug: str,
        image: Optional[str],
        display_image: Optional[str],
        product_count: int
    ):
        self.id = id
        self.name = name
        self.slug = slug
        self.image = image
        self.display_image = display_image
        self.product_count = product_count

    @classmethod
    def from_domain(cls, category: ProductCategory) -> 'CategoryDTO':
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            image=category.image,
            display_image=category.display_image,
            product_count=category.product_count
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CategoryDTO':
        return cls(
            id=str(data.get('_id')),
            name=data.get('name', ''),
            slug=data.get('slug', ''),
            image=data.get('image'),
            display_image=data.get('displayImage'),
            product_count=int(data.get('productCount', 0))
        )


class DealsPageDTO:
    """特惠页面数据传输对象"""

    def __init__(
        self,
        items: List[ProductDTO],
        categories: List[str],
        total_deals: int,
        countdown: CountdownParts,
        filters: Dict[str, Any]
    ):
        """
        初始化特惠页面DTO。

        Args:
            items: 筛选、排序后的特惠商品
            categories: 可选分类（首项为"all"）
            total_deals: 筛选前的特惠商品总数
            countdown: 距今日特惠结束的剩余时间
            filters: 实际生效的筛选条件
        """
        self.items = items
        self.categories = categories
        self.total_deals = total_deals
        self.countdown = countdown
        self.filters = filters
