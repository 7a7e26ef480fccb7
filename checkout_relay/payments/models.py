"""
Structures transitoires d'une demande de session Snap (rien n'est persisté).
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# module checkout_relay.payments.models
class OrderRequest(BaseModel):
    """
    Corps JSON reçu du front.
    - transaction_details doit être un objet (order_id, gross_amount y sont exigés).
    - customer_details et item_details sont relayés tels quels: Midtrans valide leur format.
    - Les champs inconnus sont ignorés.
    """
    model_config = ConfigDict(extra="ignore")

    transaction_details: Optional[Dict[str, Any]] = None
    customer_details: Any = None
    item_details: Any = None


class SessionResult(BaseModel):
    token: Optional[str] = None
    redirect_url: Optional[str] = None


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PROVIDER = "provider"


class GatewayError(BaseModel):
    """
    Erreur structurée renvoyée par la gateway (jamais levée).
    - details: réponse brute de Midtrans si disponible, sinon le texte de l'erreur.
    - is_production: environnement Midtrans actif au moment de l'erreur.
    """
    model_config = ConfigDict(populate_by_name=True)

    kind: ErrorKind
    message: str
    details: Any = None
    is_production: bool = Field(default=False, alias="isProduction")
