from flask import request
from mamaalert.schemas.chat_schema import ChatSchema, SmsRequestSchema
from mamaalert.services import ai_nurse_service, sms_service
from mamaalert.services.pregnancy_service import get_record, week_for_record
from mamaalert.utils.http import ok, error, json_body, validate_schema


def chat_handler():
    data, errors = validate_schema(ChatSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Message cannot be empty", 400, details=errors)

    week = data.get("pregnancy_week")
    has_delivered = data.get("has_delivered")
    if week is None or has_delivered is None:
        record = get_record(request.user_id)
        if week is None:
            week = week_for_record(record)
        if has_delivered is None:
            has_delivered = bool(record and record.delivery_date)

    result = ai_nurse_service.ask(
        data["message"],
        pregnancy_week=week,
        has_delivered=has_delivered,
        baby_count=data.get("baby_count"),
        baby_ages=data.get("baby_ages"),
    )
    return ok(result.to_dict(), 200 if result.success else 502)


def send_sms_handler():
    data, errors = validate_schema(SmsRequestSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid SMS request", 400, details=errors)

    if not data["emergency_contacts"] and not data.get("phone_number"):
        return error("VALIDATION_ERROR", "At least one recipient is required", 400)

    result = sms_service.send_sms(
        message=data["message"],
        user_name=data["user_name"],
        message_type=data["message_type"],
        contacts=data["emergency_contacts"],
        phone_number=data.get("phone_number"),
        user_location=data.get("user_location"),
    )
    return ok(result.to_dict(), 200 if result.success else 500)
