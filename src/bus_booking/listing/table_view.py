from collections.abc import Sequence
from typing import Generic, TypeVar

from bus_booking.listing.query import DEFAULT_PAGE_SIZE, Page, filter_records, paginate

T = TypeVar("T")


class TableView(Generic[T]):
    """検索語・ページ位置・表示件数を保持する一覧ビュー

    検索語や表示件数を変えると1ページ目に戻る。
    """

    def __init__(
        self,
        records: Sequence[T],
        search_keys: Sequence[str],
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._records = list(records)
        self._search_keys = tuple(search_keys)
        self._page_size = page_size
        self._search_term = ""
        self._page = 1

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return self.current().total_pages

    def set_records(self, records: Sequence[T]) -> None:
        """元データを差し替える（ページ位置は current() で補正される）"""
        self._records = list(records)

    def search(self, term: str) -> None:
        self._search_term = term
        self._page = 1

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1: {page_size}")
        self._page_size = page_size
        self._page = 1

    def change_page(self, direction: int) -> None:
        """direction だけページを移動する（範囲外になる場合は移動しない）"""
        new_page = self._page + direction
        if 1 <= new_page <= self.total_pages:
            self._page = new_page

    def current(self) -> Page[T]:
        """現在のページを返す"""
        filtered = filter_records(self._records, self._search_term, self._search_keys)
        result = paginate(filtered, self._page, self._page_size)
        self._page = result.page
        return result
