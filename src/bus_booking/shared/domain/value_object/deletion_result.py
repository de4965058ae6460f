from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntegrityConflict:
    """削除を拒否した理由（参照元レコードが存在する）"""

    entity_type: str
    entity_id: str
    dependent_type: str
    dependent_ids: tuple[str, ...]
    message: str


@dataclass(frozen=True)
class DeletionResult:
    """削除操作の結果

    参照整合性チェックで拒否された場合は例外ではなくこの値で返す。
    """

    deleted: bool
    conflict: IntegrityConflict | None = None

    @classmethod
    def ok(cls) -> DeletionResult:
        return cls(deleted=True)

    @classmethod
    def not_found(cls) -> DeletionResult:
        return cls(deleted=False)

    @classmethod
    def refused(cls, conflict: IntegrityConflict) -> DeletionResult:
        return cls(deleted=False, conflict=conflict)

    @property
    def refused_by_conflict(self) -> bool:
        return self.conflict is not None
