import copy
import json
from collections.abc import Mapping, Sequence

from bus_booking.shared.infrastructure.key_value_storage import KeyValueStorage
from bus_booking.shared.infrastructure.seed_data import SEED_DATA
from bus_booking.shared.utils import get_logger

logger = get_logger("collection-store")


class CollectionStore:
    """コレクション名 → レコード一覧 を KeyValueStorage に読み書きする

    - 保存は常にコレクション全体の上書き
    - 読み込みは例外を投げない。欠損・破損時はシードデータで初期化し直す
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        seed: Mapping[str, Sequence[dict]] | None = None,
    ) -> None:
        self._storage = storage
        self._seed = SEED_DATA if seed is None else seed

    def load(self, name: str) -> list:
        """コレクションを読み込む"""
        try:
            raw = self._storage.get_item(name)
        except Exception:
            logger.warning(
                "Failed to read collection. Using seed data",
                extra={"collection": name},
                exc_info=True,
            )
            return self._seed_records(name)

        if raw is None:
            logger.info(
                "Collection not initialized. Writing seed data",
                extra={"collection": name},
            )
            return self._reinitialize(name)

        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.warning(
                "Stored collection is not valid JSON. Falling back to seed data",
                extra={"collection": name},
            )
            return self._reinitialize(name)

        if not isinstance(parsed, list):
            logger.warning(
                "Stored collection is not a list. Falling back to seed data",
                extra={"collection": name, "stored_type": type(parsed).__name__},
            )
            return self._reinitialize(name)

        return parsed

    def save(self, name: str, records: Sequence[dict]) -> None:
        """コレクション全体を書き込む"""
        self._storage.set_item(name, json.dumps(list(records), ensure_ascii=False))

    def _reinitialize(self, name: str) -> list:
        records = self._seed_records(name)
        try:
            self.save(name, records)
        except Exception:
            logger.warning(
                "Failed to write seed data back to storage",
                extra={"collection": name},
                exc_info=True,
            )
        return records

    def _seed_records(self, name: str) -> list:
        return copy.deepcopy(list(self._seed.get(name, [])))
