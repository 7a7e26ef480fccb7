from fastapi import APIRouter, Request

from checkout_relay.health.service import env_check_info, status_info

router = APIRouter(tags=["Health"])


@router.get("/")
def health_root(request: Request):
    return status_info(request.app.state.midtrans_config, origin=request.headers.get("origin"))


@router.get("/check-env")
def check_env(request: Request):
    return env_check_info(request.app.state.midtrans_config)
