import json

import pytest

from bus_booking.customer.applications.add_customer import AddCustomerService
from bus_booking.customer.applications.sign_up import SignUpService
from bus_booking.customer.domain.factory import CustomerFactory
from bus_booking.customer.handlers import sign_up
from bus_booking.customer.infrastructure.store_customer_repository import (
    StoreCustomerRepository,
)


@pytest.fixture
def customer_repository(store):
    return StoreCustomerRepository(store)


@pytest.fixture
def service(customer_repository):
    return SignUpService(
        repository=customer_repository,
        add_customer_service=AddCustomerService(
            repository=customer_repository, factory=CustomerFactory()
        ),
    )


class TestAddCustomerService:
    def test_add_appends_customer(self, mock_repository):
        service = AddCustomerService(repository=mock_repository, factory=CustomerFactory())

        customer = service.add({"name": "Meena Raj", "phone": "9884054321"})

        mock_repository.save.assert_called_once_with(customer)


class TestSignUpService:
    def test_sign_up_creates_customer(self, service, customer_repository):
        result = service.sign_up("Meena Raj", "9884054321")

        assert result.succeeded
        assert result.message == "Account created!"
        assert customer_repository.find_by_phone("9884054321") == result.customer

    def test_duplicate_phone_is_refused(self, service, customer_repository):
        service.sign_up("Meena Raj", "9884054321")

        result = service.sign_up("Someone Else", "9884054321")

        assert not result.succeeded
        assert result.message == "Phone number already exists."
        assert len(customer_repository.find_all()) == 1

    def test_find_for_login(self, service):
        created = service.sign_up("Meena Raj", "9884054321").customer

        assert service.find_for_login("MEENA RAJ") == created
        assert service.find_for_login("9884054321") == created
        assert service.find_for_login("nobody") is None


class TestSignUpHandler:
    @pytest.fixture(autouse=True)
    def _service(self, monkeypatch, service):
        monkeypatch.setattr(sign_up, "service", service)

    def test_sign_up_returns_201(self, api_event, lambda_context):
        response = sign_up.lambda_handler(
            api_event(body={"name": "Meena Raj", "phone": "9884054321"}), lambda_context
        )

        body = json.loads(response["body"])
        assert response["statusCode"] == 201
        assert body["data"]["customer_id"].startswith("CUST")

    def test_duplicate_phone_returns_409(self, api_event, lambda_context, service):
        service.sign_up("Meena Raj", "9884054321")

        response = sign_up.lambda_handler(
            api_event(body={"name": "Other", "phone": "9884054321"}), lambda_context
        )

        assert response["statusCode"] == 409

    def test_invalid_phone_returns_400(self, api_event, lambda_context):
        response = sign_up.lambda_handler(
            api_event(body={"name": "Meena Raj", "phone": "12345"}), lambda_context
        )
        assert response["statusCode"] == 400

    def test_blank_name_returns_400(self, api_event, lambda_context, customer_repository):
        response = sign_up.lambda_handler(
            api_event(body={"name": "   ", "phone": "9884054321"}), lambda_context
        )

        assert response["statusCode"] == 400
        assert customer_repository.find_all() == []
