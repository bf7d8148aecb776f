"""
分类、商品列表和特惠页面接口测试。
"""
import uuid
from unittest import mock

import pytest

from core.domain.exceptions import RepositoryException
from catalog.infrastructure.repositories.django_category_repository import DjangoCategoryRepository
from catalog.infrastructure.repositories.django_product_repository import DjangoProductRepository


@pytest.mark.django_db
class TestCategoryList:
    """分类列表接口"""

    def test_only_categories_with_products(self, api_client, make_category, make_product):
        electronics = make_category(
            "Electronics",
            image="https://img.example.com/e.png",
            display_image="https://img.example.com/e-wide.png"
        )
        make_category("Books")
        make_product("Phone", category=electronics)
        make_product("Tablet", category=electronics)

        response = api_client.get('/api/categories')

        assert response.status_code == 200
        assert response.json() == [{
            '_id': str(electronics.id),
            'name': "Electronics",
            'slug': "electronics",
            'image': "https://img.example.com/e.png",
            'displayImage': "https://img.example.com/e-wide.png",
            'productCount': 2,
        }]

    def test_count_reflects_current_associations(self, api_client, make_category, make_product):
        toys = make_category("Toys")
        robot = make_product("Robot", category=toys)
        assert api_client.get('/api/categories').json()[0]['productCount'] == 1

        robot.category = None
        robot.save()

        assert api_client.get('/api/categories').json() == []

    def test_missing_images_are_null(self, api_client, make_category, make_product):
        make_product("Pen", category=make_category("Office"))

        item = api_client.get('/api/categories').json()[0]

        assert item['image'] is None
        assert item['displayImage'] is None

    def test_repository_failure(self, api_client):
        failure = RepositoryException("获取分类列表", "connection refused")
        with mock.patch.object(DjangoCategoryRepository, 'list_with_products', side_effect=failure):
            response = api_client.get('/api/categories')

        assert response.status_code == 500
        assert response.json() == {'error': "服务器内部错误"}


@pytest.mark.django_db
class TestProductList:
    """商品列表接口"""

    def test_active_products_newest_first(self, api_client, make_product):
        make_product("Old", age_minutes=10)
        make_product("New", age_minutes=1)
        make_product("Hidden", is_active=False)

        names = [item['name'] for item in api_client.get('/api/products').json()]

        assert names == ["New", "Old"]

    def test_filter_by_category_slug(self, api_client, make_category, make_product):
        food = make_category("Food")
        make_product("Rice", category=food)
        make_product("Robot", category=make_category("Toys"))

        names = [item['name'] for item in api_client.get('/api/products', {'category': 'food'}).json()]

        assert names == ["Rice"]

    def test_limit(self, api_client, make_product):
        for index in range(5):
            make_product(f"Item {index}", age_minutes=index)

        items = api_client.get('/api/products', {'limit': 2}).json()

        assert [item['name'] for item in items] == ["Item 0", "Item 1"]

    @pytest.mark.parametrize('limit', ['abc', '0'])
    def test_invalid_limit(self, api_client, limit):
        response = api_client.get('/api/products', {'limit': limit})

        assert response.status_code == 400
        assert 'limit' in response.json()['error']

    def test_dangling_category_is_null(self, api_client, make_product):
        make_product("Orphan", category_id=uuid.uuid4())

        assert api_client.get('/api/products').json()[0]['category'] is None


@pytest.mark.django_db
class TestDeals:
    """特惠页面接口"""

    @pytest.fixture
    def deals(self, make_product):
        make_product("Rice", price=100, original_price=200, rating=4, category_label="Food", age_minutes=1)
        make_product("Robot", price=90, original_price=100, rating=5, category_label="Toys", age_minutes=2)
        make_product("Drone", price=10, original_price=100, rating=3, in_stock=False,
                     category_label="Toys", age_minutes=3)
        make_product("Bread", price=50, rating=2, in_stock=False, category_label="Food", age_minutes=4)
        make_product("Gift Card", price=200, original_price=100, category_label="Gifts", age_minutes=5)

    def test_defaults(self, api_client, deals):
        response = api_client.get('/api/deals')

        assert response.status_code == 200
        body = response.json()
        assert [item['name'] for item in body['items']] == ["Rice", "Robot"]
        assert body['categories'] == ["all", "Food", "Toys"]
        assert body['totalDeals'] == 3
        assert set(body['countdown']) == {'hours', 'minutes', 'seconds', 'display'}
        assert body['filters'] == {
            'mode': 'deals',
            'category': 'all',
            'discountRange': [10, 90],
            'minRating': 0,
            'inStockOnly': True,
            'sortBy': 'discount-high',
        }

    def test_query_parameters(self, api_client, deals):
        params = {'inStockOnly': 'false', 'sort': 'discount-low', 'category': 'Toys'}

        body = api_client.get('/api/deals', params).json()

        assert [item['name'] for item in body['items']] == ["Robot", "Drone"]

    def test_min_rating_and_discount_band(self, api_client, deals):
        params = {'inStockOnly': 'false', 'minDiscount': 40, 'maxDiscount': 100, 'minRating': '3.5'}

        body = api_client.get('/api/deals', params).json()

        assert [item['name'] for item in body['items']] == ["Rice"]

    @pytest.mark.parametrize('params', [
        {'sort': 'bogus'},
        {'minDiscount': 80, 'maxDiscount': 20},
        {'minRating': 'abc'},
        {'maxDiscount': 150},
    ])
    def test_invalid_parameters(self, api_client, params):
        response = api_client.get('/api/deals', params)

        assert response.status_code == 400
        assert response.json()['error']

    def test_repository_failure(self, api_client):
        failure = RepositoryException("获取商品列表", "connection refused")
        with mock.patch.object(DjangoProductRepository, 'find_discounted', side_effect=failure):
            response = api_client.get('/api/deals')

        assert response.status_code == 500
        assert response.json() == {'error': "服务器内部错误"}

    def test_older_deals_survive_candidate_limit(self, api_client, make_product):
        for index in range(3):
            make_product(f"Plain {index}", price=50, age_minutes=index)
        make_product("Old Deal", price=60, original_price=100, category_label="Food", age_minutes=60)

        with mock.patch('catalog.domain.config.DEALS_CANDIDATE_LIMIT', 2):
            body = api_client.get('/api/deals').json()

        assert [item['name'] for item in body['items']] == ["Old Deal"]
        assert body['totalDeals'] == 1
