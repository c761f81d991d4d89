"""
Purchase domain model - Immutable value type for a completed store purchase.

NO DICTIONARIES - Store receipts are decoded into this strongly typed record.

Equality and hashing are structural: two purchases with the same product id
and timestamps are interchangeable in sets and as dictionary keys.
"""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Purchase:
    """Completed in-app purchase or subscription.

    Timestamps are stored exactly as the receipt source reports them; their
    epoch and units are defined by that source. Non-subscription purchases
    carry the source's no-expiry sentinel in ``expires_date``.
    """

    product_id: str | None  # Store product identifier, None when absent
    purchase_date: float  # When the purchase was made
    expires_date: float  # When the subscription expires

    @classmethod
    def create(
        cls,
        product_id: str | None,
        purchase_date: float,
        expires_date: float,
    ) -> "Purchase":
        """Build a purchase from its three receipt fields."""
        return cls(
            product_id=product_id,
            purchase_date=purchase_date,
            expires_date=expires_date,
        )

    def _key(self) -> tuple[str | None, float, float]:
        return (self.product_id, self.purchase_date, self.expires_date)

    def __eq__(self, other: object) -> bool:
        """Compare all three fields; non-purchases are never equal."""
        if self is other:
            return True
        if not isinstance(other, Purchase):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
