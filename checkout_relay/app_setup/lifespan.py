"""
Lifespan FastAPI: vérifications au démarrage.
- Contrôle la présence des clés Midtrans (warning, ou arrêt en mode strict).
- Variables d'environnement supportées:
  - MIDTRANS_STRICT_CONFIG=1: refuse de démarrer sans clés (toujours actif si APP_ENV=production)
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from checkout_relay import config as settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Valide la configuration Midtrans avant d'accepter du trafic.
    - ConfigurationError propagée en mode strict: uvicorn n'ouvre pas le port.
    - Les logs indiquent l'environnement et le mode Midtrans effectif.
    """
    logger = logging.getLogger("uvicorn.error")
    config = app.state.midtrans_config
    settings.validate_config(config, strict=settings.STRICT_CONFIG)
    logger.info("Environment: %s", config.environment)
    logger.info("Midtrans mode: %s", config.mode)
    yield
