"""
商品目录领域服务。
包含折扣计算和特惠倒计时等不依赖存储的业务规则。
"""
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from catalog.domain.value_objects import CountdownParts

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def has_discount(price: Any, original_price: Optional[Any]) -> bool:
    """
    判断商品是否打折。

    Args:
        price: 售价
        original_price: 原价，可能为None

    Returns:
        原价存在且严格大于售价时返回True
    """
    if original_price is None:
        return False
    return _to_decimal(original_price) > _to_decimal(price)


def calculate_discount(price: Any, original_price: Optional[Any]) -> int:
    """
    计算折扣百分比。

    折扣 = round((1 - 售价/原价) * 100)，半数向上取整；
    原价缺失或不高于售价时折扣为0。

    Args:
        price: 售价
        original_price: 原价

    Returns:
        整数折扣百分比
    """
    if not has_discount(price, original_price):
        return 0
    ratio = Decimal(1) - _to_decimal(price) / _to_decimal(original_price)
    return int((ratio * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def end_of_day(moment: datetime) -> datetime:
    """
    获取给定时刻所在自然日的结束时间（23:59:59.999）。

    Args:
        moment: 参考时刻，保留其时区信息

    Returns:
        当天的截止时刻
    """
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


def remaining_time(deadline: datetime, now: datetime) -> CountdownParts:
    """
    计算距离截止时间的剩余时间。

    剩余毫秒数 = max(0, 截止时间 - 当前时间)，再依次整除得到时、分、秒。
    截止时间过后始终返回0，不会变为负数或滚动到下一天。

    Args:
        deadline: 截止时刻
        now: 当前时刻

    Returns:
        剩余时间
    """
    remaining_ms = max(0, (deadline - now) // timedelta(milliseconds=1))
    return CountdownParts(
        hours=remaining_ms // MS_PER_HOUR,
        minutes=(remaining_ms % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(remaining_ms % MS_PER_MINUTE) // MS_PER_SECOND,
    )
