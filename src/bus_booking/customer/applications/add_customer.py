from bus_booking.customer.domain.entity import Customer
from bus_booking.customer.domain.factory import CustomerDetails, CustomerFactory
from bus_booking.customer.domain.repository import CustomerRepository


class AddCustomerService:
    """顧客登録のユースケース"""

    def __init__(
        self, repository: CustomerRepository, factory: CustomerFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def add(self, details: CustomerDetails) -> Customer:
        """顧客を追加する"""
        customer = self._factory.create(details)
        self._repository.save(customer)
        return customer
