"""
仓储接口。
目录数据由后台维护，领域层只依赖查询端接口。
"""
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar('T')


class ReadOnlyRepository(Generic[T], ABC):
    """只读仓储接口"""

    @abstractmethod
    def list(self, skip: int = 0, limit: int = 100) -> List[T]:
        """按实现约定的默认顺序分页获取实体"""
