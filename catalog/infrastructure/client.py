"""
商城目录HTTP客户端。
负责请求目录接口，并把非2xx响应转换为携带服务端错误消息的异常。
"""
from typing import Any, Dict, List, Optional

import requests
from loguru import logger


class StorefrontClientError(Exception):
    """目录接口请求失败"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        """
        初始化客户端异常。

        Args:
            message: 服务端返回的error消息，或网络错误描述
            status_code: HTTP状态码，网络错误时为None
        """
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StorefrontClient:
    """
    目录接口客户端。
    每次调用只发出一个GET请求，不合并、不去重、不缓存。
    """

    def __init__(self, base_url: str, timeout: float = 10, session: Optional[requests.Session] = None):
        """
        初始化客户端。

        Args:
            base_url: 服务地址，例如 http://localhost:8000
            timeout: 请求超时时间（秒）
            session: 复用的requests会话
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def search(self, q: str) -> List[Dict[str, Any]]:
        """搜索商品，返回原始JSON数组"""
        return self._get('/api/search', {'q': q})

    def list_products(self, category: Optional[str] = None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """获取上架商品列表"""
        params = {}
        if category:
            params['category'] = category
        if limit is not None:
            params['limit'] = limit
        return self._get('/api/products', params)

    def list_categories(self) -> List[Dict[str, Any]]:
        """获取包含商品的分类列表"""
        return self._get('/api/categories')

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"请求 {url} 失败: {str(e)}")
            raise StorefrontClientError(f"网络请求失败: {str(e)}") from e

        if not response.ok:
            raise StorefrontClientError(self._error_message(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"响应 {url} 不是有效的JSON: {str(e)}")
            raise StorefrontClientError("响应数据格式错误", status_code=response.status_code) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get('error'):
            return body['error']
        return f"HTTP {response.status_code}"
