"""
搜索页与特惠页的视图模型。

页面只在加载时请求一次候选商品，之后筛选条件的每次变化都同步地在内存中
重新计算结果。加载失败时记录错误并保留原有候选商品，只能通过 retry() 重试。
"""
import threading
from decimal import Decimal
from typing import Any, Callable, List, Optional

from loguru import logger

from catalog.application.dtos import ProductDTO
from catalog.application.filtering import (
    ALL_CATEGORIES,
    MIN_PRICE_CEILING,
    FilterConfig,
    FilterMode,
    apply_filters,
    category_options,
    price_ceiling,
)
from catalog.infrastructure.client import StorefrontClient, StorefrontClientError


def _decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def parse_products(payload: Any) -> List[ProductDTO]:
    """
    把接口返回的JSON数组转换为商品DTO。

    Raises:
        StorefrontClientError: 数据结构或字段值无法解析
    """
    try:
        return [ProductDTO.from_dict(item) for item in payload]
    except (ArithmeticError, ValueError, TypeError, AttributeError) as e:
        raise StorefrontClientError(f"商品数据格式错误: {e!r}") from e


class CatalogPage:
    """
    目录页面状态。

    每次加载都会分配一个递增的序号，只有最后发出的请求可以更新状态，
    先发后到的响应会被丢弃。
    """

    def __init__(self, mode: str, fetch: Callable[[], List[ProductDTO]]):
        """
        初始化页面状态。

        Args:
            mode: 筛选模式（search 或 deals）
            fetch: 获取候选商品的函数，失败时抛出 StorefrontClientError
        """
        self.mode = mode
        self._fetch = fetch
        self._lock = threading.Lock()
        self._sequence = 0

        self.candidates: List[ProductDTO] = []
        self.max_price = MIN_PRICE_CEILING
        self.config = FilterConfig(mode=mode).defaults(self.max_price)
        self.results: List[ProductDTO] = []
        self.categories: List[str] = [ALL_CATEGORIES]
        self.loading = False
        self.error: Optional[str] = None

    @classmethod
    def for_search(cls, client: StorefrontClient, q: str) -> 'CatalogPage':
        """创建搜索页，候选商品来自 /api/search"""
        return cls(
            FilterMode.SEARCH,
            lambda: parse_products(client.search(q))
        )

    @classmethod
    def for_deals(cls, client: StorefrontClient) -> 'CatalogPage':
        """创建特惠页，候选商品来自 /api/products"""
        return cls(
            FilterMode.DEALS,
            lambda: parse_products(client.list_products())
        )

    def begin_load(self) -> int:
        """标记开始加载，返回本次请求的序号"""
        with self._lock:
            self._sequence += 1
            self.loading = True
            self.error = None
            return self._sequence

    def complete_load(
        self,
        ticket: int,
        candidates: Optional[List[ProductDTO]] = None,
        error: Optional[str] = None
    ) -> bool:
        """
        提交一次加载的结果。

        Args:
            ticket: begin_load() 返回的序号
            candidates: 获取到的候选商品
            error: 失败时的错误消息

        Returns:
            结果被采纳时返回True，过期的响应返回False
        """
        with self._lock:
            if ticket != self._sequence:
                logger.debug(f"丢弃过期响应 #{ticket}，最新请求 #{self._sequence}")
                return False

            self.loading = False
            if error is not None:
                self.error = error
                return True

            self.candidates = list(candidates or [])
            ceiling = price_ceiling(self.candidates)
            if self.mode == FilterMode.SEARCH and self.config.value_range == (Decimal(0), Decimal(self.max_price)):
                # 价格区间仍为默认值时跟随新的上限
                self.config = self.config.replace(value_range=(Decimal(0), Decimal(ceiling)))
            self.max_price = ceiling
            self._derive()
            return True

    def load(self) -> bool:
        """
        获取候选商品并重新计算结果。

        Returns:
            加载成功且结果被采纳时返回True
        """
        ticket = self.begin_load()
        try:
            candidates = self._fetch()
        except StorefrontClientError as e:
            logger.warning(f"加载{self.mode}页面失败: {e.message}")
            self.complete_load(ticket, error=e.message)
            return False
        return self.complete_load(ticket, candidates=candidates)

    def retry(self) -> bool:
        """用户触发的重试"""
        return self.load()

    def set_category(self, category: str):
        self._update(category=category or ALL_CATEGORIES)

    def set_value_range(self, low: Any, high: Any):
        """设置区间，搜索页为售价区间，特惠页为折扣区间"""
        self._update(value_range=(_decimal(low), _decimal(high)))

    def set_min_rating(self, rating: Any):
        self._update(min_rating=_decimal(rating))

    def set_in_stock_only(self, in_stock_only: bool):
        self._update(in_stock_only=bool(in_stock_only))

    def set_sort(self, sort_by: str):
        self._update(sort_by=sort_by)

    def reset(self):
        """一次性恢复全部筛选和排序条件的默认值"""
        with self._lock:
            self.config = self.config.defaults(self.max_price)
            self._derive()

    def _update(self, **changes):
        with self._lock:
            self.config = self.config.replace(**changes)
            self._derive()

    def _derive(self):
        self.categories = category_options(self.candidates, self.mode)
        self.results = apply_filters(self.candidates, self.config)
