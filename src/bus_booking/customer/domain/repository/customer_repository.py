from abc import abstractmethod

from bus_booking.customer.domain.entity import Customer
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.shared.domain import Repository


class CustomerRepository(Repository[Customer, CustomerId]):
    """顧客リポジトリのインターフェース"""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """顧客を追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        """顧客IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Customer]:
        """全顧客を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_phone(self, phone: str) -> Customer | None:
        """電話番号で検索する"""
        raise NotImplementedError
