"""
Gestionnaire d'exceptions global.
- Toute exception non gérée par une route devient un 500 JSON {success: false, error}.
- Les HTTPException (404, 405, ...) gardent le traitement standard de FastAPI.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("SERVER ERROR on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})
