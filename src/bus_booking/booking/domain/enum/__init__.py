from .booking_status import BookingStatus as BookingStatus
