from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.emergency_controller import (
    list_contacts_handler,
    create_contact_handler,
    update_contact_handler,
    delete_contact_handler,
    trigger_alert_handler,
    list_alerts_handler,
)

emergency_bp = Blueprint("emergency", __name__, url_prefix="/api/emergency")

@emergency_bp.get("/contacts")
@require_auth
def list_contacts():
    return list_contacts_handler()

@emergency_bp.post("/contacts")
@require_auth
def create_contact():
    return create_contact_handler()

@emergency_bp.put("/contacts/<int:id>")
@require_auth
def update_contact(id):
    return update_contact_handler(id)

@emergency_bp.delete("/contacts/<int:id>")
@require_auth
def delete_contact(id):
    return delete_contact_handler(id)


@emergency_bp.post("/alerts")
@require_auth
def trigger_alert():
    return trigger_alert_handler()

@emergency_bp.get("/alerts")
@require_auth
def list_alerts():
    return list_alerts_handler()
