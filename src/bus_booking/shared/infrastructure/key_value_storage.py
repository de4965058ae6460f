from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """文字列キー → 文字列値 の永続ストレージ"""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """値を取得する（未登録なら None）"""
        raise NotImplementedError

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """値を上書き保存する"""
        raise NotImplementedError


class InMemoryKeyValueStorage(KeyValueStorage):
    """プロセス内の dict を使った KeyValueStorage（テスト・ローカル実行用）"""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
