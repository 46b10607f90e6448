from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from mamaalert.extensions import db
from mamaalert.models.emergency import EmergencyContact
from mamaalert.schemas.emergency_schema import EmergencyContactSchema, EmergencyAlertSchema
from mamaalert.services import emergency_alert_service
from mamaalert.services.emergency_alert_service import EmergencyAlertError, DEFAULT_MESSAGE
from mamaalert.services.geolocation_service import DEFAULT_LOCATION
from mamaalert.utils.http import ok, error, json_body, validate_schema, arg_int


# ============================================================================
# Emergency contacts
# ============================================================================

def list_contacts_handler():
    contacts = EmergencyContact.query.filter_by(user_id=request.user_id).order_by(
        EmergencyContact.is_primary.desc(), EmergencyContact.id
    ).all()
    return ok({"items": [c.to_dict() for c in contacts]})


def create_contact_handler():
    data, errors = validate_schema(EmergencyContactSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid contact data", 400, details=errors)

    contact = EmergencyContact(user_id=request.user_id, **data)
    try:
        db.session.add(contact)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Create contact error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to save contact.", 500)
    return ok(contact.to_dict(), 201)


def update_contact_handler(contact_id):
    contact = EmergencyContact.query.filter_by(id=contact_id, user_id=request.user_id).first()
    if not contact:
        return error("NOT_FOUND", "Contact not found", 404)

    data, errors = validate_schema(EmergencyContactSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid contact data", 400, details=errors)

    for field, value in data.items():
        setattr(contact, field, value)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Update contact error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to update contact.", 500)
    return ok(contact.to_dict())


def delete_contact_handler(contact_id):
    contact = EmergencyContact.query.filter_by(id=contact_id, user_id=request.user_id).first()
    if not contact:
        return error("NOT_FOUND", "Contact not found", 404)
    try:
        db.session.delete(contact)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Delete contact error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to delete contact.", 500)
    return ok({"message": "Contact deleted"})


# ============================================================================
# Emergency alerts
# ============================================================================

def trigger_alert_handler():
    data, errors = validate_schema(EmergencyAlertSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid alert data", 400, details=errors)

    coords = None
    if data.get("latitude") is not None:
        coords = (data["latitude"], data["longitude"])

    try:
        result = emergency_alert_service.trigger(
            request.user_id,
            message=data.get("message") or DEFAULT_MESSAGE,
            location=data.get("location") or DEFAULT_LOCATION,
            coords=coords,
            client_ip=request.remote_addr,
        )
    except EmergencyAlertError as e:
        return error("ALERT_FAILED", str(e), 500, notifications=[{
            "title": "Alert Failed",
            "description": str(e),
            "variant": "destructive",
        }])

    return ok(result.to_dict(), 201)


def list_alerts_handler():
    limit = arg_int("limit", 20, min_value=1, max_value=100)
    alerts = emergency_alert_service.list_alerts(request.user_id, limit=limit)
    return ok({"items": [a.to_dict() for a in alerts]})
