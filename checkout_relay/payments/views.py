import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .models import ErrorKind, GatewayError
from .service import CheckoutGateway

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payments"])

WITHHELD_DETAILS = "Payment provider error, details withheld (see server logs)"


def get_gateway(request: Request) -> CheckoutGateway:
    """Gateway construite par la factory et rangée dans app.state (surchargée en tests)."""
    return request.app.state.gateway


def error_response(error: GatewayError, expose_details: bool = True) -> JSONResponse:
    """
    Réponse 500 homogène {success, message, details, isProduction}.
    - expose_details=False: le détail brut Midtrans reste dans les logs, le client reçoit un résumé.
    """
    details = error.details
    if error.kind == ErrorKind.PROVIDER and not expose_details:
        details = WITHHELD_DETAILS
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": error.message,
            "details": details,
            "isProduction": error.is_production,
        },
    )


# module checkout_relay.payments.views
@router.get("/test-midtrans")
async def test_midtrans(gateway: CheckoutGateway = Depends(get_gateway)):
    """
    Test de connexion Midtrans: crée une transaction synthétique (1000, TEST-<ms>).
    - Succès: {success, message, token, environment}
    - Échec: 500 {success: false, message, details, isProduction}
    """
    result = await run_in_threadpool(gateway.check_connectivity)
    if isinstance(result, GatewayError):
        return error_response(result, gateway.config.expose_provider_errors)
    return {
        "success": True,
        "message": "Midtrans connection successful",
        "token": result.token,
        "environment": gateway.config.environment,
    }


@router.post("/get-snap-token")
async def get_snap_token(request: Request, gateway: CheckoutGateway = Depends(get_gateway)):
    """
    Crée un token Snap pour la commande du front.
    - Entrée JSON: {transaction_details: {order_id, gross_amount}, customer_details?, item_details?}
    - Succès: {success: true, token, redirect_url}
    - Échec (validation ou Midtrans): 500 {success: false, message, details, isProduction}
    """
    logger.info("POST /get-snap-token received")
    body: Any
    try:
        body = await request.json()
    except Exception:
        # Corps vide ou non JSON: traité comme une commande sans champs requis
        body = None

    result = await run_in_threadpool(gateway.create_session, body)
    if isinstance(result, GatewayError):
        return error_response(result, gateway.config.expose_provider_errors)
    return {"success": True, "token": result.token, "redirect_url": result.redirect_url}
