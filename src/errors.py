"""
Error taxonomy for receipt processing.

Every error carries the HTTP status the API answers with, so the app can map
them with a single exception handler.
"""


class ReceiptError(Exception):
    status_code = 500
    default_message = "Receipt processing failed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class ReceiptValidationError(ReceiptError):
    """Raised when the submitted JSON or one of its fields cannot be parsed."""

    status_code = 400
    default_message = "The receipt is invalid"


class DuplicateReceiptError(ReceiptError):
    """Raised when a receipt with the same retailer, date, time and total exists."""

    status_code = 409
    default_message = "duplicate receipt"


class IdentifierExhaustedError(ReceiptError):
    """Raised when every identifier attempt collided with a stored receipt."""

    status_code = 500
    default_message = "could not create an id for the receipt"


class ReceiptNotFoundError(ReceiptError):
    status_code = 404
    default_message = "No receipt found for that id"


class CorruptRecordError(ReceiptError):
    """Raised when a stored receipt record cannot be decoded."""

    status_code = 500
    default_message = "stored receipt record is corrupt"
