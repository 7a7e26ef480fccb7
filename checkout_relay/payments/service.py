"""
Cas d'usage 'payments': valide la demande, construit le payload Snap, appelle Midtrans
et normalise la réponse (SessionResult) ou l'échec (GatewayError).
"""
import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from checkout_relay.config import MidtransConfig
from . import payload as snap_payload
from .midtrans_client import SnapProvider, provider_error_details
from .models import ErrorKind, GatewayError, OrderRequest, SessionResult

logger = logging.getLogger(__name__)

REQUEST_FAILED_MESSAGE = "Midtrans request failed"
TEST_FAILED_MESSAGE = "Midtrans test failed"

GatewayResult = Union[SessionResult, GatewayError]


# module checkout_relay.payments.service
class CheckoutGateway:
    """
    Frontière entre le front et Midtrans Snap.
    - config: MidtransConfig immuable, injectée à la construction
    - provider: client Snap (ou double de test) exposant create_transaction
    Aucune méthode publique ne laisse échapper une exception du provider.
    """

    def __init__(self, config: MidtransConfig, provider: SnapProvider):
        self.config = config
        self.provider = provider

    def create_session(self, body: Any) -> GatewayResult:
        """
        Crée une session Snap pour une commande du front.
        - Rejette (sans appel réseau) si order_id ou gross_amount manque.
        - Applique les valeurs par défaut client/articles et l'option carte sécurisée.
        """
        order = _parse_order(body)
        if order is None or snap_payload.missing_required_fields(order):
            logger.info("payments.create_session rejected: %s", snap_payload.MISSING_FIELDS_MESSAGE)
            return self._error(ErrorKind.VALIDATION, REQUEST_FAILED_MESSAGE, snap_payload.MISSING_FIELDS_MESSAGE)

        parameter = snap_payload.build_snap_parameter(order)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Sending transaction to Midtrans: %s", json.dumps(parameter, indent=2, default=str))
        return self._submit(parameter, REQUEST_FAILED_MESSAGE)

    def check_connectivity(self) -> GatewayResult:
        """Envoie une transaction de test (1000, identifiants TEST-<ms>) pour vérifier les clés."""
        logger.info("Testing Midtrans connection (%s)", self.config.mode)
        return self._submit(snap_payload.build_test_parameter(), TEST_FAILED_MESSAGE)

    def _submit(self, parameter: Dict[str, Any], failure_message: str) -> GatewayResult:
        order_id = (parameter.get("transaction_details") or {}).get("order_id")
        try:
            transaction = self.provider.create_transaction(parameter)
            result = SessionResult(token=transaction.get("token"), redirect_url=transaction.get("redirect_url"))
        except Exception as e:
            details = provider_error_details(e)
            logger.error("Midtrans call failed order_id=%s details=%s", order_id, details)
            return self._error(ErrorKind.PROVIDER, failure_message, details)

        logger.info("Snap token created order_id=%s token=%s", order_id, result.token)
        return result

    def _error(self, kind: ErrorKind, message: str, details: Any) -> GatewayError:
        return GatewayError(kind=kind, message=message, details=details, is_production=self.config.is_production)


def _parse_order(body: Any) -> Optional[OrderRequest]:
    """Valide la forme du corps JSON; None si ce n'est pas un objet exploitable."""
    if not isinstance(body, dict):
        return None
    try:
        return OrderRequest.model_validate(body)
    except ValidationError:
        return None
