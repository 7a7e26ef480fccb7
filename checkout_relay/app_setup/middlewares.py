import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from checkout_relay.config import CORS_ORIGINS, CORS_METHODS, CORS_HEADERS

logger = logging.getLogger(__name__)

"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS restreint aux fronts connus.
- register_request_log_middleware: une ligne de log par requête (méthode, chemin, origine).
Notes:
- L'ordre d'ajout est important: le dernier middleware ajouté s'exécute en premier.
"""
def register_basic_middlewares(app: FastAPI) -> None:
    """
    CORSMiddleware:
    - origines: liste blanche (CORS_ORIGINS)
    - méthodes: GET, POST, OPTIONS
    - en-têtes: Content-Type, Authorization
    - credentials autorisés
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )


def register_request_log_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s from %s", request.method, request.url.path, request.headers.get("origin"))
        return await call_next(request)
