from datetime import datetime, timezone
from typing import Any, Dict, Optional

from checkout_relay.config import MidtransConfig, mask_key

SERVICE_MESSAGE = "Checkout relay server is running!"


def status_info(config: MidtransConfig, origin: Optional[str] = None) -> Dict[str, Any]:
    return {
        "status": "active",
        "message": SERVICE_MESSAGE,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "origin": origin,
        "environment": config.environment,
        "midtrans_configured": bool(config.server_key),
        "isProduction": config.is_production,
    }


def env_check_info(config: MidtransConfig) -> Dict[str, Any]:
    """
    Présence des clés Midtrans sur le serveur, sans jamais les exposer en entier.
    isProduction provient de la configuration Midtrans elle-même.
    """
    return {
        "message": "Checking environment variables on server",
        "environment": config.environment,
        "isProduction": config.is_production,
        "server_key_exists": bool(config.server_key),
        "server_key_preview": mask_key(config.server_key),
        "client_key_exists": bool(config.client_key),
        "client_key_preview": mask_key(config.client_key),
    }
