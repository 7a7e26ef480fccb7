"""
Module 'payments' (feature-first): point d'entrée public.
Réunit modèles, mise en forme du payload Snap, client Midtrans et gateway.
"""

from .models import OrderRequest, SessionResult, GatewayError, ErrorKind
from .payload import build_snap_parameter, build_test_parameter, missing_required_fields, DEFAULT_CUSTOMER
from .midtrans_client import build_snap, provider_error_details
from .service import CheckoutGateway

__all__ = [
    # models
    "OrderRequest",
    "SessionResult",
    "GatewayError",
    "ErrorKind",
    # payload
    "build_snap_parameter",
    "build_test_parameter",
    "missing_required_fields",
    "DEFAULT_CUSTOMER",
    # midtrans
    "build_snap",
    "provider_error_details",
    # gateway
    "CheckoutGateway",
]
