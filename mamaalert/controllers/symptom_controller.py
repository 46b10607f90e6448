from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from mamaalert.schemas.symptom_schema import SymptomLogSchema, LaborWatchSchema
from mamaalert.services import symptom_service
from mamaalert.services.emergency_alert_service import EmergencyAlertError
from mamaalert.services.pregnancy_service import current_week_for_user
from mamaalert.utils.http import ok, error, json_body, validate_schema, arg_int


def log_symptom_handler():
    data, errors = validate_schema(SymptomLogSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Please select a symptom", 400, details=errors)

    try:
        result = symptom_service.log_symptom(
            request.user_id, data["symptom"], data["severity"], data.get("description")
        )
    except EmergencyAlertError as e:
        return error("ALERT_FAILED", str(e), 500)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Symptom log error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to log symptom.", 500)

    return ok(result, 201)


def list_symptoms_handler():
    limit = arg_int("limit", 20, min_value=1, max_value=100)
    logs = symptom_service.list_symptoms(request.user_id, limit=limit)
    return ok({"items": [s.to_dict() for s in logs]})


def labor_watch_handler():
    data, errors = validate_schema(LaborWatchSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid labor signs", 400, details=errors)

    user_id = request.user_id
    try:
        result = symptom_service.evaluate_labor_signs(user_id, data["signs"], current_week_for_user(user_id))
    except EmergencyAlertError as e:
        return error("ALERT_FAILED", str(e), 500)
    return ok(result)
