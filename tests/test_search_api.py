"""
商品搜索接口测试。
"""
import uuid
from unittest import mock

import pytest

from core.domain.exceptions import RepositoryException
from catalog.infrastructure.repositories.django_product_repository import DjangoProductRepository

SEARCH_URL = '/api/search'


def _searchable_texts(item):
    category = item['category']
    if isinstance(category, dict):
        category = category['name']
    texts = [item['name'], item['description'], item['productId'], category or '']
    return texts + item['features']


@pytest.mark.django_db
class TestProductSearch:
    """搜索接口"""

    @pytest.fixture
    def catalog(self, make_category, make_product):
        pads = make_category("Mouse Pads", slug="mouse-pads")
        office = make_category("Office", slug="office")
        make_product("Wireless Mouse", age_minutes=1)
        make_product("USB Hub", description="Works with any MOUSE or keyboard", age_minutes=2)
        make_product("Keyboard", product_id="KB-MOUSE-01", age_minutes=3)
        make_product("Gel Pad", category=pads, age_minutes=4)
        make_product("Trap", category_label="Mousetraps", age_minutes=5)
        make_product("Laptop Stand", features=["Aluminium", "Room for a mouse"], age_minutes=6)
        make_product("Desk Lamp", category=office, age_minutes=7)
        # 有分类引用时不使用纯文本分类匹配
        make_product("Stapler", category=office, category_label="mouse", age_minutes=8)

    def test_every_hit_contains_keyword(self, api_client, catalog):
        response = api_client.get(SEARCH_URL, {'q': 'MOUSE'})

        assert response.status_code == 200
        items = response.json()
        assert [item['name'] for item in items] == [
            "Wireless Mouse",
            "USB Hub",
            "Keyboard",
            "Gel Pad",
            "Trap",
            "Laptop Stand",
        ]
        for item in items:
            assert any('mouse' in text.lower() for text in _searchable_texts(item))

    def test_feature_match_returns_product_once(self, api_client, make_product):
        make_product("Speaker", features=["Bass boost", "Bass port"])

        response = api_client.get(SEARCH_URL, {'q': 'bass'})

        assert [item['name'] for item in response.json()] == ["Speaker"]

    def test_surrounding_spaces_are_part_of_keyword(self, api_client, make_product):
        make_product("Mousepad", age_minutes=1)
        make_product("Wireless Mouse", age_minutes=2)

        response = api_client.get(SEARCH_URL, {'q': ' mouse'})

        assert response.status_code == 200
        assert [item['name'] for item in response.json()] == ["Wireless Mouse"]

    def test_padded_keyword_does_not_match_across_space(self, api_client, make_product):
        make_product("Mousepad")

        response = api_client.get(SEARCH_URL, {'q': ' mouse'})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize('params', [{}, {'q': ''}, {'q': '   '}])
    def test_missing_keyword_is_rejected_without_query(self, api_client, params):
        with mock.patch.object(DjangoProductRepository, 'search') as search:
            response = api_client.get(SEARCH_URL, params)

        assert response.status_code == 400
        assert "搜索关键词不能为空" in response.json()['error']
        search.assert_not_called()

    def test_response_shape(self, api_client, make_category, make_product):
        audio = make_category("Audio", slug="audio")
        make_product(
            "Headphones",
            price='199.00',
            original_price='249.00',
            category=audio,
            brand="Acme",
            rating='4.5',
            reviews=12,
            images=["https://img.example.com/h.png"],
            features=["Noise cancelling"],
        )

        item = api_client.get(SEARCH_URL, {'q': 'headphones'}).json()[0]

        assert set(item) == {
            '_id', 'productId', 'name', 'description', 'category', 'brand', 'features',
            'price', 'originalPrice', 'images', 'rating', 'reviews', 'inStock',
            'isActive', 'createdAt', 'updatedAt',
        }
        assert item['category'] == {'_id': str(audio.id), 'name': "Audio", 'slug': "audio"}
        assert item['price'] == 199.0
        assert item['originalPrice'] == 249.0
        assert item['rating'] == 4.5
        assert item['features'] == ["Noise cancelling"]
        assert isinstance(item['_id'], str)
        assert isinstance(item['createdAt'], str)

    def test_dangling_category_is_null(self, api_client, make_product):
        make_product("Orphan Lamp", category_id=uuid.uuid4())

        response = api_client.get(SEARCH_URL, {'q': 'orphan'})

        assert response.status_code == 200
        assert response.json()[0]['category'] is None

    def test_plain_text_category(self, api_client, make_product):
        make_product("Apple", category_label="Food")

        item = api_client.get(SEARCH_URL, {'q': 'apple'}).json()[0]

        assert item['category'] == "Food"

    def test_inactive_products_are_excluded(self, api_client, make_product):
        make_product("Retired Camera", is_active=False)
        make_product("Camera Bag")

        names = [item['name'] for item in api_client.get(SEARCH_URL, {'q': 'camera'}).json()]

        assert names == ["Camera Bag"]

    def test_results_are_capped(self, api_client, make_product):
        for index in range(25):
            make_product(f"Cable {index}", age_minutes=index)

        items = api_client.get(SEARCH_URL, {'q': 'cable'}).json()

        assert len(items) == 20
        assert items[0]['name'] == "Cable 0"

    def test_repository_failure_returns_internal_error(self, api_client):
        failure = RepositoryException("搜索商品", "connection refused")
        with mock.patch.object(DjangoProductRepository, 'search', side_effect=failure):
            response = api_client.get(SEARCH_URL, {'q': 'mouse'})

        assert response.status_code == 500
        assert response.json() == {'error': "服务器内部错误"}

    def test_unexpected_failure_returns_internal_error(self, api_client):
        service = mock.Mock()
        service.search_products.side_effect = RuntimeError("boom")
        with mock.patch('catalog.api.views.get_catalog_service', return_value=service):
            response = api_client.get(SEARCH_URL, {'q': 'mouse'})

        assert response.status_code == 500
        assert response.json() == {'error': "服务器内部错误"}
