from .entity import MAX_SEATS_PER_BOOKING as MAX_SEATS_PER_BOOKING
from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .factory import PassengerDetails as PassengerDetails
from .repository import BookingRepository as BookingRepository
from .value_object import BookingId as BookingId
from .value_object import Passenger as Passenger
from .value_object import PaymentId as PaymentId
