class HotelBookingError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdError(HotelBookingError):
    status_code = 400
    default_message = "Invalid ID format"


class MissingParameterError(HotelBookingError):
    status_code = 400
    default_message = "Missing required parameter"


class NotFoundError(HotelBookingError):
    status_code = 404
    default_message = "Not found"


class UnauthenticatedError(HotelBookingError):
    status_code = 401
    default_message = "Access denied"


class InvalidTokenError(HotelBookingError):
    status_code = 401
    default_message = "Invalid token"


class ForbiddenError(HotelBookingError):
    status_code = 403
    default_message = "Forbidden access"


class CancellationWindowClosedError(HotelBookingError):
    status_code = 400
    default_message = "Cannot cancel booking less than 1 day before the booked date"


class StorageError(HotelBookingError):
    status_code = 500
    default_message = "Database error"


class BookingFailedError(HotelBookingError):
    status_code = 500
    default_message = "Failed to book room"
