"""
Mise en forme pure du payload Snap (pas d'appel réseau).
"""
import time
from typing import Any, Dict, Optional

from .models import OrderRequest

MISSING_FIELDS_MESSAGE = "Missing required fields: order_id or gross_amount"

DEFAULT_CUSTOMER = {
    "first_name": "Customer",
    "email": "customer@example.com",
    "phone": "08123456789",
}

# Toujours activé, quelle que soit la demande du front
CREDIT_CARD_OPTIONS = {"secure": True}

TEST_GROSS_AMOUNT = 1000


# module checkout_relay.payments.payload
def missing_required_fields(order: OrderRequest) -> bool:
    """True si order_id ou gross_amount manque (ou est vide)."""
    details = order.transaction_details or {}
    return not details.get("order_id") or not details.get("gross_amount")


def build_snap_parameter(order: OrderRequest) -> Dict[str, Any]:
    """
    Construit le paramètre envoyé à Snap.create_transaction.
    - transaction_details: relayé tel quel
    - customer_details: client par défaut seulement si absent (None), relayé tel quel sinon
    - item_details: liste vide si absente, relayée telle quelle sinon (Midtrans juge du format)
    - credit_card: {"secure": True} imposé
    """
    return {
        "transaction_details": order.transaction_details,
        "customer_details": order.customer_details if order.customer_details is not None else dict(DEFAULT_CUSTOMER),
        "item_details": order.item_details if order.item_details is not None else [],
        "credit_card": dict(CREDIT_CARD_OPTIONS),
    }


def build_test_parameter(now_ms: Optional[int] = None) -> Dict[str, Any]:
    """Transaction synthétique pour vérifier les clés et la connexion Midtrans."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return {
        "transaction_details": {
            "order_id": f"TEST-{now_ms}",
            "gross_amount": TEST_GROSS_AMOUNT,
        },
        "customer_details": {
            "first_name": "Tester",
            "email": "tester@example.com",
            "phone": "08123456789",
        },
        "item_details": [{
            "id": "TEST-ITEM",
            "price": TEST_GROSS_AMOUNT,
            "quantity": 1,
            "name": "Test Product",
        }],
    }
