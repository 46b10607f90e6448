from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.mode_controller import (
    get_mode_handler,
    refresh_mode_handler,
    onboarding_mode_handler,
    switch_to_postpartum_handler,
    switch_to_pregnancy_handler,
)

mode_bp = Blueprint("mode", __name__, url_prefix="/api/mode")

@mode_bp.get("")
@require_auth
def get_mode():
    return get_mode_handler()


@mode_bp.post("/refresh")
@require_auth
def refresh_mode():
    return refresh_mode_handler()


@mode_bp.post("/onboarding")
@require_auth
def onboarding_mode():
    return onboarding_mode_handler()


@mode_bp.post("/postpartum")
@require_auth
def switch_to_postpartum():
    return switch_to_postpartum_handler()


@mode_bp.post("/pregnancy")
@require_auth
def switch_to_pregnancy():
    return switch_to_pregnancy_handler()
