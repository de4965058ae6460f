from .booking_factory import GUEST_CUSTOMER_ID as GUEST_CUSTOMER_ID
from .booking_factory import BookingDetails as BookingDetails
from .booking_factory import BookingFactory as BookingFactory
from .booking_factory import PassengerDetails as PassengerDetails
