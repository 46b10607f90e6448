from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.symptom_controller import (
    log_symptom_handler,
    list_symptoms_handler,
    labor_watch_handler,
)

symptom_bp = Blueprint("symptom", __name__, url_prefix="/api")

@symptom_bp.get("/symptoms")
@require_auth
def list_symptoms():
    return list_symptoms_handler()

@symptom_bp.post("/symptoms")
@require_auth
def log_symptom():
    return log_symptom_handler()

@symptom_bp.post("/labor-watch")
@require_auth
def labor_watch():
    return labor_watch_handler()
