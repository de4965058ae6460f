from abc import abstractmethod

from bus_booking.booking.domain.entity import Booking
from bus_booking.booking.domain.value_object import BookingId
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """座席予約リポジトリのインターフェース

    予約は物理削除しないため delete は持たない。
    """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_schedule_id(self, schedule_id: ScheduleId) -> list[Booking]:
        """運行スケジュールIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_customer_id(self, customer_id: CustomerId) -> list[Booking]:
        """顧客IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """既存の予約を置き換える

        Raises:
            ResourceNotFoundException: 予約が存在しない場合
        """
        raise NotImplementedError
