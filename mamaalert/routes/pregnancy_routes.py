from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.pregnancy_controller import get_pregnancy_handler, upsert_pregnancy_handler

pregnancy_bp = Blueprint("pregnancy", __name__, url_prefix="/api/pregnancy")

@pregnancy_bp.get("")
@require_auth
def get_pregnancy():
    return get_pregnancy_handler()

@pregnancy_bp.put("")
@require_auth
def upsert_pregnancy():
    return upsert_pregnancy_handler()
