import json

from bus_booking.shared.domain import DeletionResult, IntegrityConflict
from bus_booking.shared.utils import (
    api_response,
    deletion_response,
    round_half_up,
)


class TestApiResponse:
    def test_serializes_body_as_json(self):
        response = api_response(200, {"label": "Chennai ➝ Madurai"})
        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"] == "application/json"
        assert json.loads(response["body"]) == {"label": "Chennai ➝ Madurai"}


class TestDeletionResponse:
    def test_ok(self):
        response = deletion_response(DeletionResult.ok(), "R1")
        assert response["statusCode"] == 200
        assert json.loads(response["body"])["deleted"] == "R1"

    def test_not_found(self):
        response = deletion_response(DeletionResult.not_found(), "R1")
        assert response["statusCode"] == 404

    def test_refused(self):
        conflict = IntegrityConflict(
            entity_type="route",
            entity_id="R1",
            dependent_type="schedule",
            dependent_ids=("SCD1", "SCD2"),
            message="in use",
        )
        response = deletion_response(DeletionResult.refused(conflict), "R1")

        body = json.loads(response["body"])
        assert response["statusCode"] == 409
        assert body["message"] == "in use"
        assert body["dependent_ids"] == ["SCD1", "SCD2"]


class TestRoundHalfUp:
    def test_rounds_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(812.5) == 813

    def test_rounds_down_below_half(self):
        assert round_half_up(1000.49) == 1000
