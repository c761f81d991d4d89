"""
Purchase collection helpers.

Deduplication and change detection between two purchase fetches. Both rely
only on Purchase equality and hashing.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from purchases.models.purchase import Purchase
from purchases.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExpiryChange:
    """Same purchase seen in two fetches with a different expiry."""

    before: Purchase
    after: Purchase


def deduplicate_purchases(purchases: Iterable[Purchase]) -> list[Purchase]:
    """
    Drop repeated purchases, keeping the first occurrence of each.

    Order of first appearance is preserved.
    """
    seen: set[Purchase] = set()
    unique: list[Purchase] = []
    for purchase in purchases:
        if purchase in seen:
            continue
        seen.add(purchase)
        unique.append(purchase)
    return unique


def find_expiry_changes(
    previous: Iterable[Purchase],
    current: Iterable[Purchase],
) -> list[ExpiryChange]:
    """
    Find purchases whose expiry moved between two fetches.

    Purchases are matched on product id and purchase date. Purchases present
    in only one fetch are not reported. When ``previous`` holds several
    records for the same product id and purchase date, the last one is used.

    Args:
        previous: Purchases from the earlier fetch
        current: Purchases from the later fetch

    Returns:
        One ExpiryChange per matched purchase, in ``current`` order
    """
    earlier = {(p.product_id, p.purchase_date): p for p in previous}

    changes: list[ExpiryChange] = []
    for purchase in deduplicate_purchases(current):
        before = earlier.get((purchase.product_id, purchase.purchase_date))
        if before is not None and before.expires_date != purchase.expires_date:
            changes.append(ExpiryChange(before=before, after=purchase))

    if changes:
        logger.info(
            "purchase_expiry_changes_detected",
            count=len(changes),
            product_ids=[change.after.product_id for change in changes],
        )
    return changes
