from marshmallow import Schema, fields, validate, validates_schema, ValidationError

class EmergencyContactSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=120))
    phone = fields.Str(required=True, validate=validate.Regexp(r"^\+?[0-9 ()-]{7,20}$", error="Invalid phone number"))
    relationship = fields.Str(required=True, validate=validate.Length(min=1, max=60))
    email = fields.Email(allow_none=True)
    is_primary = fields.Bool(load_default=False)

class EmergencyAlertSchema(Schema):
    message = fields.Str(validate=validate.Length(min=1, max=1000))
    location = fields.Str(validate=validate.Length(min=1, max=255))
    latitude = fields.Float(allow_none=True, validate=validate.Range(min=-90, max=90))
    longitude = fields.Float(allow_none=True, validate=validate.Range(min=-180, max=180))

    @validates_schema
    def validate_coords(self, data, **kwargs):
        if (data.get("latitude") is None) != (data.get("longitude") is None):
            raise ValidationError("latitude and longitude must be sent together", field_name="latitude")

class ReminderSettingsSchema(Schema):
    enabled = fields.Bool(required=True)
