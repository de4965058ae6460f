from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import ClassVar, TypeVar

T = TypeVar("T", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """エンティティID 基底クラス

    "<PREFIX><ランダム16進12桁>" の形式で採番する。
    例: "R3F9A1C0B2E7D", "BK0C4E9A7F21B3"
    """

    PREFIX: ClassVar[str] = ""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(f"{type(self).__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls: type[T]) -> T:
        """新しいIDを採番する"""
        return cls(value=f"{cls.PREFIX}{uuid.uuid4().hex[:12].upper()}")
