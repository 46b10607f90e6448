from flask import request
from mamaalert.schemas.emergency_schema import ReminderSettingsSchema
from mamaalert.services.pregnancy_service import current_week_for_user
from mamaalert.services.roadmap_service import RoadmapTracker
from mamaalert.services.session_service import current_sessions
from mamaalert.utils.http import ok, error, json_body, validate_schema


def _tracker():
    user_id = request.user_id
    return RoadmapTracker(user_id, session=current_sessions().get(user_id))


def _summary(tracker):
    body = tracker.summary(current_week_for_user(tracker.user_id))
    body["notifications"] = [n.to_dict() for n in tracker.notices]
    return body


def get_plan_handler():
    return ok(_summary(_tracker()))


def toggle_item_handler(item_id):
    tracker = _tracker()
    try:
        checked = tracker.toggle(item_id)
    except ValueError as e:
        return error("ITEM_NOT_FOUND", str(e).split(": ", 1)[-1], 404)

    if checked is None:
        return error("PERSISTENCE_ERROR", "Failed to update checklist.", 500,
                     notifications=[n.to_dict() for n in tracker.notices])

    body = _summary(tracker)
    body["item"] = {"id": item_id, "is_checked": checked}
    return ok(body)


def set_reminders_handler():
    data, errors = validate_schema(ReminderSettingsSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "enabled must be a boolean", 400, details=errors)

    tracker = _tracker()
    if not tracker.set_weekly_reminders(data["enabled"]):
        return error("PERSISTENCE_ERROR", "Failed to update reminder settings.", 500,
                     notifications=[n.to_dict() for n in tracker.notices])
    return ok({
        "weekly_reminders": data["enabled"],
        "notifications": [n.to_dict() for n in tracker.notices],
    })
