from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from bus_booking.shared.domain import (
    DomainException,
    DuplicateResourceException,
    Entity,
    ResourceNotFoundException,
)
from bus_booking.shared.infrastructure.collection_store import CollectionStore
from bus_booking.shared.utils import get_logger

logger = get_logger("collection-repository")

E = TypeVar("E", bound=Entity)
R = TypeVar("R", bound="StoredRecord")


class StoredRecord(BaseModel):
    """保存レコードの基底モデル（JSON上のキーは camelCase）"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_item(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class CollectionRepository(Generic[E, R]):
    """CollectionStore 上の1コレクションを扱うリポジトリ基底クラス

    - 呼び出しのたびにストアから読み込む（キャッシュしない）
    - 変更のたびにコレクション全体を書き戻してから返る
    - 検証できないレコードは読み飛ばし、書き戻す際は元の位置のまま残す
    """

    collection_name: ClassVar[str]
    record_model: ClassVar[type[StoredRecord]]

    def __init__(self, store: CollectionStore) -> None:
        self._store = store

    def find_all(self) -> list[E]:
        """全件を保存順で取得する"""
        return self._load()

    def find_by_id(self, id) -> E | None:
        """IDで検索する"""
        return next((entity for entity in self._load() if entity.id == id), None)

    def save(self, entity: E) -> None:
        """エンティティを末尾に追加する"""
        entities, unreadable = self._read()
        if any(existing.id == entity.id for existing in entities):
            raise DuplicateResourceException(
                f"{self.collection_name} already contains: {entity.id}"
            )
        entities.append(entity)
        self._write(entities, unreadable)

    def _replace(self, entity: E) -> None:
        entities, unreadable = self._read()
        for index, existing in enumerate(entities):
            if existing.id == entity.id:
                entities[index] = entity
                self._write(entities, unreadable)
                return
        raise ResourceNotFoundException(
            f"{self.collection_name} has no record: {entity.id}"
        )

    def _remove(self, id) -> bool:
        entities, unreadable = self._read()
        remaining = [entity for entity in entities if entity.id != id]
        if len(remaining) == len(entities):
            return False
        self._write(remaining, unreadable)
        return True

    def _load(self) -> list[E]:
        return self._read()[0]

    def _read(self) -> tuple[list[E], list[tuple[int, object]]]:
        """エンティティと、検証できなかった生レコード（位置付き）を返す"""
        entities: list[E] = []
        unreadable: list[tuple[int, object]] = []
        for position, item in enumerate(self._store.load(self.collection_name)):
            try:
                record = self.record_model.model_validate(item)
                entities.append(self._to_entity(record))
            except (ValueError, DomainException) as e:
                logger.warning(
                    "Skipping malformed record",
                    extra={
                        "collection": self.collection_name,
                        "position": position,
                        "error": str(e),
                    },
                )
                unreadable.append((position, item))
        return entities, unreadable

    def _write(
        self, entities: list[E], unreadable: list[tuple[int, object]]
    ) -> None:
        # 検証できなかったレコードも元の位置に戻して書き戻す
        items: list[object] = [self._to_record(entity).to_item() for entity in entities]
        for position, item in unreadable:
            items.insert(min(position, len(items)), item)
        self._store.save(self.collection_name, items)

    def _to_entity(self, record: R) -> E:
        """保存レコードをドメインエンティティに変換する"""
        raise NotImplementedError

    def _to_record(self, entity: E) -> R:
        """ドメインエンティティを保存レコードに変換する"""
        raise NotImplementedError
