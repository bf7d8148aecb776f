"""
值对象基类。
"""
from typing import Any, Tuple


class ValueObject:
    """
    值对象基类。
    没有标识，按全部属性值判断相等，类型不同的值对象永不相等。
    """

    def _components(self) -> Tuple:
        return tuple(sorted(self.__dict__.items()))

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._components())
