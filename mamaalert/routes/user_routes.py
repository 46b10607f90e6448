from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.profile_controller import get_profile_handler, update_profile_handler

user_bp = Blueprint("user", __name__, url_prefix="/api/profile")

@user_bp.get("")
@require_auth
def get_profile():
    return get_profile_handler()

@user_bp.put("")
@require_auth
def update_profile():
    return update_profile_handler()
