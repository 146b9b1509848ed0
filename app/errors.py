# app/errors.py

class ReceiptError(Exception):
    """Base class for errors raised by the receipt core."""


class ValidationError(ReceiptError):
    """A submitted receipt failed one of the ordered validation checks.

    `reason` is one of the fixed messages in app.rules.validator and is
    returned to clients verbatim.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ReceiptNotFound(ReceiptError):
    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt not found: {receipt_id}")
        self.receipt_id = receipt_id
