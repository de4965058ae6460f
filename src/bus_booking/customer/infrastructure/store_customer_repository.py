from bus_booking.customer.domain.entity import Customer
from bus_booking.customer.domain.repository import CustomerRepository
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.shared.infrastructure import CollectionRepository, StoredRecord


class CustomerRecord(StoredRecord):
    """customers コレクションの保存形式"""

    customer_id: str
    name: str
    phone: str
    lifetime_bookings: int = 0
    loyalty_discount: float = 0.0


class StoreCustomerRepository(
    CollectionRepository[Customer, CustomerRecord], CustomerRepository
):
    """CollectionStore を使用した CustomerRepository の具象実装"""

    collection_name = "customers"
    record_model = CustomerRecord

    def find_by_phone(self, phone: str) -> Customer | None:
        return next((c for c in self._load() if c.phone == phone.strip()), None)

    def _to_entity(self, record: CustomerRecord) -> Customer:
        return Customer(
            id=CustomerId(value=record.customer_id),
            name=record.name,
            phone=record.phone,
            lifetime_bookings=record.lifetime_bookings,
            loyalty_discount=record.loyalty_discount,
        )

    def _to_record(self, customer: Customer) -> CustomerRecord:
        return CustomerRecord(
            customer_id=str(customer.id),
            name=customer.name,
            phone=customer.phone,
            lifetime_bookings=customer.lifetime_bookings,
            loyalty_discount=customer.loyalty_discount,
        )
