"""
Platform channel models - Pydantic shapes for maps exchanged with the host app.

The native store layers send each purchase as a flat map. iOS uses
``productId``/``purchaseDate``/``expiresDate``; the Android billing layer
uses ``identifier``/``purchaseTime`` and has no expiry. Extra keys such as
``orderId`` or ``purchaseToken`` are ignored.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class PurchaseChannelPayload(BaseModel):
    """One purchase as carried over the platform channel.

    Timestamps keep their numeric type: integer milliseconds stay ``int``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    product_id: str | None = Field(
        None,
        validation_alias=AliasChoices("productId", "identifier", "product_id"),
    )
    purchase_date: StrictInt | StrictFloat = Field(
        ...,
        validation_alias=AliasChoices("purchaseDate", "purchaseTime", "purchase_date"),
    )
    expires_date: StrictInt | StrictFloat | None = Field(
        None,
        validation_alias=AliasChoices("expiresDate", "expires_date"),
    )
