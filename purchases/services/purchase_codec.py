"""
Purchase Channel Codec.

Converts the maps exchanged with the host app into Purchase records and back.

NO DICTIONARIES past this boundary - callers only ever see Purchase instances.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from purchases.config import get_settings
from purchases.exceptions import MalformedPurchaseError
from purchases.models.channel import PurchaseChannelPayload
from purchases.models.purchase import Purchase
from purchases.observability.logging import get_logger, log_context

logger = get_logger(__name__)


def purchase_from_channel(data: Any) -> Purchase:
    """
    Decode one channel map into a Purchase.

    Args:
        data: Map sent by the native store layer

    Returns:
        Purchase built from the map values, timestamps not reinterpreted

    Raises:
        MalformedPurchaseError: If the map is missing the purchase date or
            carries values of the wrong type
    """
    try:
        payload = PurchaseChannelPayload.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "purchase_payload_rejected",
            error_count=e.error_count(),
            errors=[err["msg"] for err in e.errors()],
        )
        raise MalformedPurchaseError(str(e), payload=data) from e

    expires_date = payload.expires_date
    if expires_date is None:
        expires_date = get_settings().no_expiry_sentinel

    return Purchase.create(payload.product_id, payload.purchase_date, expires_date)


def purchases_from_channel(
    items: Iterable[Any] | None,
    method: str = "fetchPurchases",
) -> list[Purchase]:
    """
    Decode the purchase list returned by a channel method.

    Args:
        items: Maps sent by the native store layer; None means no purchases
        method: Channel method that produced the list, bound to every log entry

    Raises:
        MalformedPurchaseError: If ``items`` is not a list of maps or any
            entry cannot be decoded
    """
    with log_context(channel_method=method):
        if items is None:
            return []

        if isinstance(items, (Mapping, str, bytes)) or not isinstance(items, Iterable):
            logger.warning("purchase_list_rejected", payload_type=type(items).__name__)
            raise MalformedPurchaseError(
                f"expected a list of purchases, got {type(items).__name__}",
                payload=items,
            )

        purchases = [purchase_from_channel(item) for item in items]
        logger.debug("purchases_decoded", count=len(purchases))
        return purchases


def purchase_to_channel(purchase: Purchase) -> dict[str, Any]:
    """Encode a Purchase as the map the host app expects."""
    return {
        "productId": purchase.product_id,
        "purchaseDate": purchase.purchase_date,
        "expiresDate": purchase.expires_date,
    }


def purchases_to_channel(purchases: Iterable[Purchase]) -> list[dict[str, Any]]:
    return [purchase_to_channel(purchase) for purchase in purchases]
