from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.roadmap_controller import (
    get_plan_handler,
    toggle_item_handler,
    set_reminders_handler,
)

planning_bp = Blueprint("planning", __name__, url_prefix="/api/emergency-plan")

@planning_bp.get("")
@require_auth
def get_plan():
    return get_plan_handler()

@planning_bp.post("/items/<item_id>/toggle")
@require_auth
def toggle_item(item_id):
    return toggle_item_handler(item_id)

@planning_bp.put("/reminders")
@require_auth
def set_reminders():
    return set_reminders_handler()
