from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.healthcare_controller import nearby_handler

healthcare_bp = Blueprint("healthcare", __name__, url_prefix="/api/healthcare")

@healthcare_bp.get("/nearby")
@require_auth
def nearby():
    return nearby_handler()
