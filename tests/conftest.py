"""
Pytest Configuration and Centralized Fixtures.

Provides reusable purchase records and channel maps:
- Subscription and consumable purchases
- iOS and Android shaped channel maps
"""

import os
from typing import Any

import pytest

# Set environment defaults BEFORE importing package modules
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "json")

from purchases.models.purchase import Purchase

# ============================================================================
# Purchase Fixtures
# ============================================================================


@pytest.fixture
def subscription() -> Purchase:
    """Monthly subscription purchase with an expiry."""
    return Purchase("com.app.sub", 1000.0, 2000.0)


@pytest.fixture
def consumable() -> Purchase:
    """Consumable purchase carrying the zero no-expiry sentinel."""
    return Purchase("com.app.coins_100", 1500.0, 0.0)


# ============================================================================
# Channel Map Fixtures
# ============================================================================


@pytest.fixture
def ios_channel_map() -> dict[str, Any]:
    """Purchase map as sent by the iOS store layer."""
    return {
        "productId": "com.app.sub",
        "purchaseDate": 1000.0,
        "expiresDate": 2000.0,
    }


@pytest.fixture
def android_channel_map() -> dict[str, Any]:
    """Purchase map as sent by the Android billing layer."""
    return {
        "orderId": "GPA.1234-5678-9012-34567",
        "packageName": "com.app",
        "identifier": "com.app.coins_100",
        "purchaseToken": "opaque-token-value",
        "purchaseTime": 1527254400000,
        "autorenewal": "false",
    }
