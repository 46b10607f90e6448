from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from mamaalert.schemas.pregnancy_schema import PregnancyDetailsSchema
from mamaalert.services.pregnancy_service import get_record, sync_week, upsert_pregnancy_details
from mamaalert.services.session_service import current_sessions
from mamaalert.utils.http import ok, error, json_body, validate_schema


def get_pregnancy_handler():
    user_id = request.user_id
    session = current_sessions().get(user_id)
    record = get_record(user_id)
    if not record:
        return ok({"pregnancy": None, "current_week": 0, **session.mode.to_dict()})

    week = sync_week(record)
    return ok({"pregnancy": record.to_dict(), "current_week": week, **session.mode.to_dict()})


def upsert_pregnancy_handler():
    user_id = request.user_id
    data, errors = validate_schema(PregnancyDetailsSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid pregnancy details", 400, details=errors)

    try:
        record = upsert_pregnancy_details(user_id, data)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Pregnancy details error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to save pregnancy details.", 500)

    session = current_sessions().get(user_id)
    session.mode.refresh_mode()
    week = sync_week(record)
    return ok({"pregnancy": record.to_dict(), "current_week": week, **session.mode.to_dict()})
