from marshmallow import Schema, fields, validate

class AppointmentSchema(Schema):
    appointment_date = fields.Date(required=True)
    appointment_time = fields.Time(required=True)
    hospital_name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    notes = fields.Str(allow_none=True)
