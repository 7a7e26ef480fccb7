"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `checkout_relay.asgi:app`.
- Toute la configuration FastAPI (CORS, routes, Midtrans) est centralisée dans checkout_relay.app_setup.
"""

from checkout_relay.app import app
