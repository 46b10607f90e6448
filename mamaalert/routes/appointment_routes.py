from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.appointment_controller import (
    list_appointments_handler,
    create_appointment_handler,
    delete_appointment_handler,
    send_reminders_handler,
)

appointment_bp = Blueprint("appointment", __name__, url_prefix="/api/appointments")

@appointment_bp.get("")
@require_auth
def list_appointments():
    return list_appointments_handler()

@appointment_bp.post("")
@require_auth
def create_appointment():
    return create_appointment_handler()

@appointment_bp.delete("/<int:id>")
@require_auth
def delete_appointment(id):
    return delete_appointment_handler(id)

@appointment_bp.post("/reminders")
@require_auth
def send_reminders():
    return send_reminders_handler()
