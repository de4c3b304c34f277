from enum import StrEnum


class BookingErrorKind(StrEnum):
    invalid_input = "invalid_input"
    not_found = "not_found"
    room_unavailable = "room_unavailable"
    insufficient_balance = "insufficient_balance"


class BookingError(Exception):
    def __init__(self, kind: BookingErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid_input(cls, message: str) -> "BookingError":
        return cls(BookingErrorKind.invalid_input, message)

    @classmethod
    def not_found(cls, message: str) -> "BookingError":
        return cls(BookingErrorKind.not_found, message)

    @classmethod
    def room_unavailable(cls, message: str) -> "BookingError":
        return cls(BookingErrorKind.room_unavailable, message)

    @classmethod
    def insufficient_balance(cls, message: str) -> "BookingError":
        return cls(BookingErrorKind.insufficient_balance, message)
