from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from mamaalert.schemas.appointment_schema import AppointmentSchema
from mamaalert.services import appointment_service
from mamaalert.utils.http import ok, error, json_body, validate_schema, arg_str


def list_appointments_handler():
    upcoming = (arg_str("upcoming", "false") or "").lower() in ("1", "true", "yes")
    items = appointment_service.list_appointments(request.user_id, upcoming_only=upcoming)
    return ok({"items": [a.to_dict() for a in items]})


def create_appointment_handler():
    data, errors = validate_schema(AppointmentSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid appointment", 400, details=errors)
    try:
        appt = appointment_service.create_appointment(request.user_id, data)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Create appointment error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to save appointment.", 500)
    return ok(appt.to_dict(), 201)


def delete_appointment_handler(appointment_id):
    try:
        deleted = appointment_service.delete_appointment(request.user_id, appointment_id)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Delete appointment error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to delete appointment.", 500)
    if not deleted:
        return error("NOT_FOUND", "Appointment not found", 404)
    return ok({"message": "Appointment deleted"})


def send_reminders_handler():
    try:
        result = appointment_service.send_due_reminders(request.user_id)
    except SQLAlchemyError:
        return error("PERSISTENCE_ERROR", "Reminders were sent but could not be recorded.", 500)
    return ok(result)
