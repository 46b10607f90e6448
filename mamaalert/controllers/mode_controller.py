from datetime import date
from flask import request
from mamaalert.schemas.pregnancy_schema import DeliverySchema, OnboardingModeSchema
from mamaalert.services.session_service import current_sessions
from mamaalert.utils.http import ok, error, json_body, validate_schema


def _respond(store, succeeded: bool):
    notifications = [n.to_dict() for n in store.drain_notices()]
    if not succeeded:
        return error(
            "PERSISTENCE_ERROR", "Failed to update mode", 500,
            notifications=notifications, **store.to_dict()
        )
    return ok({**store.to_dict(), "notifications": notifications})


def get_mode_handler():
    store = current_sessions().get(request.user_id).mode
    return ok(store.to_dict())


def refresh_mode_handler():
    store = current_sessions().get(request.user_id).mode
    store.refresh_mode()
    return ok(store.to_dict())


def onboarding_mode_handler():
    data, errors = validate_schema(OnboardingModeSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid mode", 400, details=errors)

    store = current_sessions().get(request.user_id).mode
    return _respond(store, store.set_onboarding_mode(data["mode"]))


def switch_to_postpartum_handler():
    data, errors = validate_schema(DeliverySchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "delivery_date must be in YYYY-MM-DD format", 400, details=errors)

    store = current_sessions().get(request.user_id).mode
    delivered_on = data.get("delivery_date") or date.today()
    return _respond(store, store.switch_to_postpartum(delivered_on))


def switch_to_pregnancy_handler():
    store = current_sessions().get(request.user_id).mode
    return _respond(store, store.switch_to_pregnancy())
