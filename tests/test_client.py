"""
目录HTTP客户端测试。
"""
from unittest import mock

import pytest
import requests

from catalog.infrastructure.client import StorefrontClient, StorefrontClientError


def _response(status_code, payload=None):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    return response


class TestStorefrontClient:
    """客户端请求与错误转换"""

    @pytest.fixture
    def session(self):
        return mock.Mock(spec=requests.Session)

    def test_search(self, session):
        session.get.return_value = _response(200, [{'_id': '1', 'name': "Mouse"}])
        client = StorefrontClient("http://shop.local/", timeout=3, session=session)

        assert client.search("mouse") == [{'_id': '1', 'name': "Mouse"}]
        session.get.assert_called_once_with(
            "http://shop.local/api/search",
            params={'q': "mouse"},
            timeout=3
        )

    def test_list_products_params(self, session):
        session.get.return_value = _response(200, [])
        client = StorefrontClient("http://shop.local", session=session)

        client.list_products(category="food", limit=5)
        client.list_products()

        assert session.get.call_args_list == [
            mock.call("http://shop.local/api/products", params={'category': "food", 'limit': 5}, timeout=10),
            mock.call("http://shop.local/api/products", params={}, timeout=10),
        ]

    def test_list_categories(self, session):
        session.get.return_value = _response(200, [{'name': "Food", 'productCount': 3}])
        client = StorefrontClient("http://shop.local", session=session)

        assert client.list_categories() == [{'name': "Food", 'productCount': 3}]

    def test_server_error_message_is_kept(self, session):
        session.get.return_value = _response(400, {'error': "字段'q'验证失败: 搜索关键词不能为空"})
        client = StorefrontClient("http://shop.local", session=session)

        with pytest.raises(StorefrontClientError) as exc_info:
            client.search("")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "字段'q'验证失败: 搜索关键词不能为空"

    def test_non_json_error(self, session):
        session.get.return_value = _response(502)
        client = StorefrontClient("http://shop.local", session=session)

        with pytest.raises(StorefrontClientError) as exc_info:
            client.list_categories()

        assert exc_info.value.message == "HTTP 502"
        assert exc_info.value.status_code == 502

    def test_success_with_invalid_json(self, session):
        session.get.return_value = _response(200)
        client = StorefrontClient("http://shop.local", session=session)

        with pytest.raises(StorefrontClientError) as exc_info:
            client.search("mouse")

        assert exc_info.value.message == "响应数据格式错误"
        assert exc_info.value.status_code == 200

    def test_network_failure(self, session):
        session.get.side_effect = requests.ConnectionError("refused")
        client = StorefrontClient("http://shop.local", session=session)

        with pytest.raises(StorefrontClientError) as exc_info:
            client.list_products()

        assert exc_info.value.status_code is None
        assert "refused" in exc_info.value.message
