"""
Registre central des routers.
- Health: / et /check-env
- Payments: /test-midtrans et /get-snap-token
"""
from fastapi import FastAPI

from checkout_relay.health.router import router as health_router
from checkout_relay.payments import views as payments_views


def register_routers(app: FastAPI) -> None:
    app.include_router(health_router)
    app.include_router(payments_views.router)
