"""
商品列表的内存筛选与排序。

搜索页和特惠页都先一次性获取候选商品，之后所有筛选条件的变化都只在内存中
重新计算，不再请求服务端。两个页面的区间筛选含义不同：
搜索页按售价区间筛选，特惠页按折扣百分比区间筛选，并且只有打折商品才是候选。
"""
import dataclasses
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, List, Sequence, Tuple

from core.domain.exceptions import ValidationException
from catalog.domain.services import calculate_discount, has_discount

# 表示"全部分类"的哨兵值
ALL_CATEGORIES = 'all'

# 价格区间控件上限的最小值和取整步长
MIN_PRICE_CEILING = 1000
PRICE_CEILING_STEP = 100

# 特惠页面默认折扣区间
DEFAULT_DISCOUNT_RANGE = (10, 90)


class FilterMode:
    """筛选模式"""
    SEARCH = 'search'  # 搜索页：售价区间
    DEALS = 'deals'    # 特惠页：折扣区间，仅打折商品


class SortOption:
    """排序选项"""
    DISCOUNT_HIGH = 'discount-high'
    DISCOUNT_LOW = 'discount-low'
    PRICE_LOW = 'price-low'
    PRICE_HIGH = 'price-high'
    RATING = 'rating'
    NAME = 'name'
    NEWEST = 'newest'
    RELEVANCE = 'relevance'

    ALL = (
        DISCOUNT_HIGH,
        DISCOUNT_LOW,
        PRICE_LOW,
        PRICE_HIGH,
        RATING,
        NAME,
        NEWEST,
        RELEVANCE,
    )


# 各模式的默认排序
DEFAULT_SORT = {
    FilterMode.SEARCH: SortOption.RELEVANCE,
    FilterMode.DEALS: SortOption.DISCOUNT_HIGH,
}


@dataclass(frozen=True)
class FilterConfig:
    """
    筛选配置。

    不可变值，任何筛选条件的变化都生成新的配置。
    value_range 在搜索模式下是售价区间，在特惠模式下是折扣百分比区间，两端都包含。
    """
    mode: str = FilterMode.SEARCH
    category: str = ALL_CATEGORIES
    value_range: Tuple[Decimal, Decimal] = (Decimal(0), Decimal(MIN_PRICE_CEILING))
    min_rating: Decimal = Decimal(0)
    in_stock_only: bool = False
    sort_by: str = SortOption.RELEVANCE

    def __post_init__(self):
        if self.mode not in DEFAULT_SORT:
            raise ValidationException("mode", f"未知的筛选模式: {self.mode}")
        low, high = self.value_range
        if low > high:
            raise ValidationException("range", f"区间下限{low}不能大于上限{high}")

    @classmethod
    def search_defaults(cls, max_price: Any = MIN_PRICE_CEILING) -> 'FilterConfig':
        """
        搜索页默认筛选条件。

        Args:
            max_price: 价格区间控件的上限

        Returns:
            全部分类、售价[0, max_price]、不限评分、不限库存、按相关度排序
        """
        return cls(
            mode=FilterMode.SEARCH,
            category=ALL_CATEGORIES,
            value_range=(Decimal(0), Decimal(max_price)),
            min_rating=Decimal(0),
            in_stock_only=False,
            sort_by=SortOption.RELEVANCE,
        )

    @classmethod
    def deals_defaults(cls) -> 'FilterConfig':
        """
        特惠页默认筛选条件。

        Returns:
            全部分类、折扣[10, 90]、不限评分、仅有货、按折扣从高到低排序
        """
        low, high = DEFAULT_DISCOUNT_RANGE
        return cls(
            mode=FilterMode.DEALS,
            category=ALL_CATEGORIES,
            value_range=(Decimal(low), Decimal(high)),
            min_rating=Decimal(0),
            in_stock_only=True,
            sort_by=SortOption.DISCOUNT_HIGH,
        )

    def defaults(self, max_price: Any = MIN_PRICE_CEILING) -> 'FilterConfig':
        """返回与当前模式对应的默认条件"""
        if self.mode == FilterMode.DEALS:
            return FilterConfig.deals_defaults()
        return FilterConfig.search_defaults(max_price)

    def replace(self, **changes) -> 'FilterConfig':
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        low, high = self.value_range
        range_key = 'discountRange' if self.mode == FilterMode.DEALS else 'priceRange'
        return {
            'mode': self.mode,
            'category': self.category,
            range_key: [low, high],
            'minRating': self.min_rating,
            'inStockOnly': self.in_stock_only,
            'sortBy': self.sort_by,
        }


def is_deal(item: Any) -> bool:
    """原价存在且高于售价的商品才是特惠候选"""
    return has_discount(item.price, item.original_price)


def discount_of(item: Any) -> int:
    return calculate_discount(item.price, item.original_price)


def eligible_candidates(candidates: Iterable[Any], mode: str) -> List[Any]:
    """
    按模式取得候选商品。

    Args:
        candidates: 全部已获取的商品
        mode: 筛选模式

    Returns:
        特惠模式下只保留打折商品，搜索模式下原样返回
    """
    if mode == FilterMode.DEALS:
        return [item for item in candidates if is_deal(item)]
    return list(candidates)


def _matches(item: Any, config: FilterConfig) -> bool:
    if config.category != ALL_CATEGORIES and item.category_name != config.category:
        return False

    low, high = config.value_range
    value = discount_of(item) if config.mode == FilterMode.DEALS else item.price
    if value < low or value > high:
        return False

    if item.rating < config.min_rating:
        return False

    if config.in_stock_only and not item.in_stock:
        return False

    return True


def _newest_key(item: Any) -> float:
    return item.created_at.timestamp() if item.created_at else -math.inf


def sort_items(items: Sequence[Any], sort_by: str, mode: str = FilterMode.SEARCH) -> List[Any]:
    """
    稳定排序。

    Args:
        items: 已筛选的商品
        sort_by: 排序选项，未知值按模式默认排序处理
        mode: 筛选模式

    Returns:
        排序后的新列表，relevance保持输入顺序
    """
    if sort_by not in SortOption.ALL:
        sort_by = DEFAULT_SORT[mode]

    if sort_by == SortOption.DISCOUNT_HIGH:
        return sorted(items, key=discount_of, reverse=True)
    if sort_by == SortOption.DISCOUNT_LOW:
        return sorted(items, key=discount_of)
    if sort_by == SortOption.PRICE_LOW:
        return sorted(items, key=lambda item: item.price)
    if sort_by == SortOption.PRICE_HIGH:
        return sorted(items, key=lambda item: item.price, reverse=True)
    if sort_by == SortOption.RATING:
        return sorted(items, key=lambda item: item.rating, reverse=True)
    if sort_by == SortOption.NAME:
        return sorted(items, key=lambda item: (item.name or '').casefold())
    if sort_by == SortOption.NEWEST:
        return sorted(items, key=_newest_key, reverse=True)
    return list(items)


def apply_filters(candidates: Iterable[Any], config: FilterConfig) -> List[Any]:
    """
    对候选商品执行全部筛选条件（逻辑与）并排序。

    商品对象需要提供 price、original_price、rating、in_stock、
    category_name、name、created_at 属性。

    Args:
        candidates: 全部已获取的商品
        config: 筛选配置

    Returns:
        筛选并排序后的商品列表
    """
    pool = eligible_candidates(candidates, config.mode)
    matched = [item for item in pool if _matches(item, config)]
    return sort_items(matched, config.sort_by, config.mode)


def category_options(candidates: Iterable[Any], mode: str = FilterMode.SEARCH) -> List[str]:
    """
    从未筛选的候选商品中提取分类选项。

    Args:
        candidates: 全部已获取的商品
        mode: 筛选模式，特惠模式只统计打折商品

    Returns:
        以"all"开头、按首次出现顺序排列的去重分类名称
    """
    options = [ALL_CATEGORIES]
    seen = set()
    for item in eligible_candidates(candidates, mode):
        name = item.category_name
        if name and name not in seen:
            seen.add(name)
            options.append(name)
    return options


def price_ceiling(candidates: Iterable[Any]) -> int:
    """
    计算价格区间控件的上限。

    Args:
        candidates: 全部已获取的商品

    Returns:
        最高售价向上取整到100的倍数，且不小于1000
    """
    prices = [item.price for item in candidates]
    if not prices:
        return MIN_PRICE_CEILING
    rounded = math.ceil(max(prices) / PRICE_CEILING_STEP) * PRICE_CEILING_STEP
    return max(MIN_PRICE_CEILING, int(rounded))
