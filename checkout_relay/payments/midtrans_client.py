"""
Adaptateur Midtrans: centralise la construction du client Snap et la lecture de ses erreurs.
"""
from typing import Any, Dict, Protocol

import midtransclient

from checkout_relay.config import MidtransConfig


class SnapProvider(Protocol):
    """Ce que la gateway attend du SDK: create_transaction(param) -> {token, redirect_url}."""

    def create_transaction(self, parameter: Dict[str, Any]) -> Dict[str, Any]:
        ...


# module checkout_relay.payments.midtrans_client
def build_snap(config: MidtransConfig) -> midtransclient.Snap:
    """
    Construit le client Snap une seule fois (au démarrage de l'app).
    - En absence de clé, les appels échoueront côté Midtrans (401), sans bloquer le démarrage.
    """
    return midtransclient.Snap(
        is_production=config.is_production,
        server_key=config.server_key,
        client_key=config.client_key,
    )


def provider_error_details(exc: BaseException) -> Any:
    """
    Extrait le détail le plus utile d'une erreur Midtrans:
    api_response_dict (MidtransAPIError) > message > str(exc) > repr(exc).
    """
    api_response = getattr(exc, "api_response_dict", None)
    if api_response:
        return api_response
    message = getattr(exc, "message", None)
    if message:
        return message
    return str(exc) or repr(exc)
