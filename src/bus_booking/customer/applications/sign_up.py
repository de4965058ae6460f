from dataclasses import dataclass

from bus_booking.customer.applications.add_customer import AddCustomerService
from bus_booking.customer.domain.entity import Customer
from bus_booking.customer.domain.repository import CustomerRepository
from bus_booking.shared.utils import get_logger

logger = get_logger("customer-service")


@dataclass(frozen=True)
class SignUpResult:
    """サインアップの結果"""

    succeeded: bool
    message: str
    customer: Customer | None = None


class SignUpService:
    """顧客のサインアップとログイン照合

    電話番号は顧客ごとに一意とし、既存の番号での登録は拒否する。
    """

    def __init__(
        self,
        repository: CustomerRepository,
        add_customer_service: AddCustomerService,
    ) -> None:
        self._repository = repository
        self._add_customer_service = add_customer_service

    def sign_up(self, name: str, phone: str) -> SignUpResult:
        """顧客を新規登録する"""
        if self._repository.find_by_phone(phone) is not None:
            logger.info("Sign-up refused: phone already registered")
            return SignUpResult(succeeded=False, message="Phone number already exists.")

        customer = self._add_customer_service.add({"name": name, "phone": phone})
        logger.info("Customer signed up", extra={"customer_id": str(customer.id)})
        return SignUpResult(succeeded=True, message="Account created!", customer=customer)

    def find_for_login(self, username: str) -> Customer | None:
        """名前または電話番号に一致する最初の顧客を返す"""
        return next(
            (c for c in self._repository.find_all() if c.matches_login(username)),
            None,
        )
