"""
Exception Classes - Strongly typed exception hierarchy.

NO DICTIONARIES - All exceptions have typed attributes.
"""


class PurchaseError(Exception):
    """Base exception for all purchase errors."""

    pass


class MalformedPurchaseError(PurchaseError):
    """Raised when a store payload cannot be decoded into a purchase."""

    def __init__(self, message: str, payload: object = None) -> None:
        self.message = message
        self.payload = payload
        super().__init__(f"Malformed purchase payload: {message}")
