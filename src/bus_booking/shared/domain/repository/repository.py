from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - コレクション単位の永続化を抽象化する
    - 削除操作は削除可能なエンティティのリポジトリだけが持つ
    """

    @abstractmethod
    def save(self, entity: T) -> None:
        """エンティティを追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """全件を保存順で取得する"""
        raise NotImplementedError
