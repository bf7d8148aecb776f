"""
核心领域模型基类模块。
包含Entity基类，用于所有具有唯一标识的领域对象。
"""
from typing import Any


class Entity:
    """
    实体基类。
    实体的相等性通过标识而非属性值判断。
    目录中的实体都由外部写入，读取时标识总是已知的。
    """
    def __init__(self, id: Any):
        """
        初始化实体。

        Args:
            id: 实体标识，统一保存为字符串形式
        """
        self.id = str(id)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity):
            return False
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
