import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 8


@dataclass(frozen=True)
class Page(Generic[T]):
    """ページ分割した一覧の1ページ分"""

    items: list[T] = field(default_factory=list)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 1
    total_items: int = 0


def _field_value(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def filter_records(records: Iterable[T], search_term: str, keys: Sequence[str]) -> list[T]:
    """いずれかのキーの値に検索語を含むレコードを返す（大文字小文字を区別しない）

    辞書のキー・オブジェクトの属性のどちらでも参照できる。
    空の検索語はすべてのレコードに一致する。
    """
    if not search_term:
        return list(records)

    term = search_term.lower()
    return [
        record
        for record in records
        if any(term in str(_field_value(record, key) or "").lower() for key in keys)
    ]


def paginate(records: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """指定ページの範囲を切り出す

    範囲外のページが指定された場合は1ページ目を返す。
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1: {page_size}")

    total_pages = math.ceil(len(records) / page_size) or 1
    if page < 1 or page > total_pages:
        page = 1

    start = (page - 1) * page_size
    return Page(
        items=list(records[start : start + page_size]),
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=len(records),
    )
