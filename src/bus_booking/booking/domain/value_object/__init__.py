from .booking_id import BookingId as BookingId
from .passenger import Passenger as Passenger
from .payment_id import PaymentId as PaymentId
