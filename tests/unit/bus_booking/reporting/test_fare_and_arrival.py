import pytest

from bus_booking.reporting.domain import compute_arrival_time, ticket_fare, total_fare


class TestFare:
    def test_ticket_fare_applies_multiplier(self, create_route, create_schedule):
        route = create_route(base_fare=800)
        schedule = create_schedule(fare_multiplier=1.25)
        assert ticket_fare(route, schedule) == 1000

    def test_ticket_fare_rounds_half_up(self, create_route, create_schedule):
        route = create_route(base_fare=650)
        schedule = create_schedule(fare_multiplier=1.25)
        assert ticket_fare(route, schedule) == 813

    def test_total_fare(self, create_route, create_schedule):
        route = create_route(base_fare=800)
        schedule = create_schedule(fare_multiplier=1.25)
        assert total_fare(route, schedule, 3) == 3000


class TestComputeArrivalTime:
    @pytest.mark.parametrize(
        ("departure", "duration", "expected"),
        [
            ("22:30", "3h 45m", "02:15"),
            ("21:30", "8h", "05:30"),
            ("07:00", "6h 30m", "13:30"),
            ("23:59", "0h 1m", "00:00"),
            ("10:00", "45m", "10:45"),
        ],
    )
    def test_adds_duration(self, departure, duration, expected):
        assert compute_arrival_time(departure, duration) == expected

    @pytest.mark.parametrize(
        ("departure", "duration"), [("", "8h"), ("21:30", ""), (None, "8h")]
    )
    def test_missing_input_returns_empty(self, departure, duration):
        assert compute_arrival_time(departure, duration) == ""
