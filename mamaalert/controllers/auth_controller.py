from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from mamaalert.extensions import db
from mamaalert.models.user import User
from mamaalert.schemas.user_schema import RegisterSchema, LoginSchema
from mamaalert.services.session_service import current_sessions
from mamaalert.utils.auth import create_token, check_password_hash, hash_password
from mamaalert.utils.http import ok, error, json_body, validate_schema


def _auth_payload(user):
    session = current_sessions().open(user.id)
    return {
        "token": create_token(user.id),
        "user": user.to_dict(),
        **session.mode.to_dict(),
    }


def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400, details=errors)

    email = data["email"].strip().lower()
    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, data["password"]):
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    return ok(_auth_payload(user))


def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid registration data", 400, details=errors)

    email = data["email"].strip().lower()
    if User.query.filter_by(email=email).first():
        return error("EMAIL_IN_USE", "email already registered", 409)

    try:
        user = User(
            email=email,
            password=hash_password(data["password"]),
            first_name=data["first_name"].strip(),
            last_name=(data.get("last_name") or "").strip(),
            phone=data.get("phone"),
        )
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Register error: {e}")
        return error("UNKNOWN_ERROR", "Could not create account", 500)

    return ok(_auth_payload(user), 201)


def logout_handler():
    """
    Tokens are dropped client-side; this closes the server-side session
    state (mode store, roadmap celebration flag).
    """
    current_sessions().close(request.user_id)
    return ok({"message": "Logged out successfully"})
