"""
商品目录领域模型中的值对象。
包含分类引用、分类统计、搜索查询和倒计时等值对象定义。
"""
from typing import Any, Dict, Optional

from core.domain import ValueObject, ValidationException


class CategoryRef(ValueObject):
    """
    分类引用值对象。
    商品通过它指向一个分类实体，仅包含展示所需的字段。
    """

    def __init__(self, id: Any, name: str, slug: str):
        """
        初始化分类引用。

        Args:
            id: 分类ID
            name: 分类名称
            slug: 分类别名，用于URL
        """
        self.id = str(id)
        self.name = name
        self.slug = slug

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, "name": self.name, "slug": self.slug}


class ProductCategory(ValueObject):
    """
    商品分类值对象。
    表示分类及其当前关联的商品数量。
    """

    def __init__(
        self,
        id: Any,
        name: str,
        slug: str,
        image: Optional[str] = None,
        display_image: Optional[str] = None,
        product_count: int = 0
    ):
        """
        初始化商品分类值对象。

        Args:
            id: 分类ID
            name: 分类名称
            slug: 分类别名
            image: 分类图片URL
            display_image: 分类展示图片URL
            product_count: 关联商品数量，由仓储层统计
        """
        self.id = str(id)
        self.name = name
        self.slug = slug
        self.image = image or None
        self.display_image = display_image or None
        self.product_count = product_count


class SearchQuery(ValueObject):
    """
    搜索查询值对象。
    封装关键词和结果数量上限。
    """

    def __init__(self, keyword: Optional[str], limit: int = 20):
        """
        初始化搜索查询。

        Args:
            keyword: 搜索关键词，按原样做不区分大小写的子串匹配
            limit: 返回的最大记录数

        Raises:
            ValidationException: 关键词缺失或为空白
        """
        if keyword is None or not keyword.strip():
            raise ValidationException("q", "搜索关键词不能为空")
        # 空白只用于判断是否为空，匹配时使用原始关键词
        self.keyword = keyword
        self.limit = max(1, limit)


class CountdownParts(ValueObject):
    """
    倒计时值对象。
    表示剩余的时、分、秒。
    """

    def __init__(self, hours: int, minutes: int, seconds: int):
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds

    @property
    def is_expired(self) -> bool:
        return self.hours == 0 and self.minutes == 0 and self.seconds == 0

    def padded(self) -> Dict[str, str]:
        """
        返回补齐为两位数字的时、分、秒。

        Returns:
            形如 {"hours": "05", "minutes": "09", "seconds": "00"} 的字典
        """
        return {
            "hours": f"{self.hours:02d}",
            "minutes": f"{self.minutes:02d}",
            "seconds": f"{self.seconds:02d}",
        }

    def display(self) -> str:
        parts = self.padded()
        return f"{parts['hours']}:{parts['minutes']}:{parts['seconds']}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "display": self.display(),
        }

    def __repr__(self) -> str:
        return f"CountdownParts({self.hours}, {self.minutes}, {self.seconds})"
