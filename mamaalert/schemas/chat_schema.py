from marshmallow import Schema, fields, validate
from mamaalert.utils.enums import MessageType

class ChatSchema(Schema):
    message = fields.Str(required=True, validate=validate.Length(min=1, max=2000))
    pregnancy_week = fields.Int(data_key="pregnancyWeek", allow_none=True, validate=validate.Range(min=0, max=42))
    has_delivered = fields.Bool(data_key="hasDelivered", allow_none=True)
    baby_count = fields.Int(data_key="babyCount", allow_none=True, validate=validate.Range(min=0))
    baby_ages = fields.List(fields.Raw(), data_key="babyAges", allow_none=True)

class SmsContactSchema(Schema):
    name = fields.Str(load_default="")
    phone = fields.Str(required=True)

class SmsRequestSchema(Schema):
    emergency_contacts = fields.List(fields.Nested(SmsContactSchema), data_key="emergencyContacts", load_default=list)
    phone_number = fields.Str(data_key="phoneNumber", allow_none=True)
    message = fields.Str(load_default="")
    user_location = fields.Str(data_key="userLocation", allow_none=True)
    user_name = fields.Str(data_key="userName", required=True)
    message_type = fields.Str(
        data_key="messageType",
        load_default=MessageType.GENERAL.value,
        validate=validate.OneOf([e.value for e in MessageType]),
    )
