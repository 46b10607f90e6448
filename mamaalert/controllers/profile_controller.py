from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from mamaalert.extensions import db
from mamaalert.models.user import User
from mamaalert.schemas.user_schema import ProfileUpdateSchema
from mamaalert.utils.http import ok, error, json_body, validate_schema


def get_profile_handler():
    user = User.query.get(request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)
    return ok(user.to_dict())


def update_profile_handler():
    user = User.query.get(request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)

    data, errors = validate_schema(ProfileUpdateSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid profile data", 400, details=errors)

    for field, value in data.items():
        setattr(user, field, value.strip() if isinstance(value, str) else value)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Profile update error: {e}")
        return error("PERSISTENCE_ERROR", "Failed to update profile.", 500)

    return ok(user.to_dict())
