"""
内存商品构造工具。
"""
import itertools
from datetime import datetime, timedelta
from decimal import Decimal

from catalog.application.dtos import ProductDTO

_sequence = itertools.count(1)

BASE_TIME = datetime(2024, 6, 1, 12, 0, 0)


def build_item(**overrides):
    """构造商品DTO，默认有货、无折扣、评分0，编号越大创建时间越早"""
    number = next(_sequence)
    values = {
        'id': f"id-{number}",
        'product_id': f"SKU-{number:05d}",
        'name': f"商品{number}",
        'description': "",
        'category': None,
        'brand': "",
        'features': [],
        'price': Decimal('100'),
        'original_price': None,
        'images': [],
        'rating': Decimal('0'),
        'reviews': 0,
        'in_stock': True,
        'is_active': True,
        'created_at': BASE_TIME - timedelta(minutes=number),
        'updated_at': None,
    }
    values.update(overrides)
    for key in ('price', 'original_price', 'rating'):
        if values[key] is not None:
            values[key] = Decimal(str(values[key]))
    return ProductDTO(**values)


def as_json(item):
    """转换为接口返回的JSON对象"""
    category = item.category
    if hasattr(category, 'to_dict'):
        category = category.to_dict()
    return {
        '_id': item.id,
        'productId': item.product_id,
        'name': item.name,
        'description': item.description,
        'category': category,
        'brand': item.brand,
        'features': list(item.features),
        'price': float(item.price),
        'originalPrice': float(item.original_price) if item.original_price is not None else None,
        'images': list(item.images),
        'rating': float(item.rating),
        'reviews': item.reviews,
        'inStock': item.in_stock,
        'isActive': item.is_active,
        'createdAt': item.created_at.isoformat() if item.created_at else None,
        'updatedAt': None,
    }
