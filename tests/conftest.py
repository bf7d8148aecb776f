"""
测试公共夹具。
"""
import itertools
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from catalog.infrastructure.models import Category, Product, ProductFeature

_sequence = itertools.count(1)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_category(db):
    """创建分类"""
    def _make(name, slug=None, **kwargs):
        return Category.objects.create(
            name=name,
            slug=slug or name.lower().replace(' ', '-'),
            **kwargs
        )
    return _make


@pytest.fixture
def make_product(db):
    """
    创建商品。
    age_minutes 越大创建时间越早，用于控制按时间倒序的结果。
    """
    def _make(name, price='100.00', features=(), age_minutes=0, **kwargs):
        number = next(_sequence)
        kwargs.setdefault('product_id', f"SKU-{number:05d}")
        product = Product.objects.create(name=name, price=Decimal(str(price)), **kwargs)
        for position, text in enumerate(features):
            ProductFeature.objects.create(product=product, position=position, text=text)
        Product.objects.filter(pk=product.pk).update(
            created_at=timezone.now() - timedelta(minutes=age_minutes)
        )
        product.refresh_from_db()
        return product
    return _make
