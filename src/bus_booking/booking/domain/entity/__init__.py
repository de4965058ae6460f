from .booking import MAX_SEATS_PER_BOOKING as MAX_SEATS_PER_BOOKING
from .booking import Booking as Booking
