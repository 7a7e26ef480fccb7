"""
Factory d'application recommandée pour les entrypoints (ex: checkout_relay.asgi).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from typing import Optional

from fastapi import FastAPI

from checkout_relay.config import MidtransConfig, load_midtrans_config
from checkout_relay.payments.midtrans_client import SnapProvider, build_snap
from checkout_relay.payments.service import CheckoutGateway
from .lifespan import lifespan
from .middlewares import register_basic_middlewares, register_request_log_middleware
from .exceptions import register_exception_handlers
from .routers import register_routers
from .static import mount_static_files


def create_app(config: Optional[MidtransConfig] = None, provider: Optional[SnapProvider] = None) -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - middlewares (CORS, log des requêtes)
      - gestionnaire d'exceptions global
      - routers (health, payments) puis fichiers statiques en dernier
    Paramètres:
      config: MidtransConfig (par défaut lue depuis l'environnement)
      provider: client Snap (par défaut midtransclient.Snap construit depuis config)
    """
    config = config or load_midtrans_config()
    provider = provider or build_snap(config)

    app = FastAPI(title="Checkout Relay", lifespan=lifespan)
    app.state.midtrans_config = config
    app.state.gateway = CheckoutGateway(config, provider)

    register_basic_middlewares(app)
    register_request_log_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    mount_static_files(app)
    return app
