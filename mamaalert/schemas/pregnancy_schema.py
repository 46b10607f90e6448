from datetime import date
from marshmallow import Schema, fields, validate, validates, validates_schema, ValidationError
from mamaalert.utils.enums import UserMode

class PregnancyDetailsSchema(Schema):
    last_menstrual_period = fields.Date(allow_none=True)
    due_date = fields.Date(allow_none=True)
    weeks_pregnant = fields.Int(allow_none=True, validate=validate.Range(min=0, max=42))
    is_high_risk = fields.Bool()
    medical_conditions = fields.Str(allow_none=True)
    allergies = fields.Str(allow_none=True)
    current_medications = fields.Str(allow_none=True)
    previous_pregnancies = fields.Str(allow_none=True)
    doctor_name = fields.Str(allow_none=True, validate=validate.Length(max=120))
    hospital_name = fields.Str(allow_none=True, validate=validate.Length(max=200))
    emergency_notes = fields.Str(allow_none=True)

    @validates("last_menstrual_period")
    def validate_lmp(self, value, **kwargs):
        if value and value > date.today():
            raise ValidationError("Last menstrual period cannot be in the future")

    @validates_schema
    def validate_dates(self, data, **kwargs):
        lmp, due = data.get("last_menstrual_period"), data.get("due_date")
        if lmp and due and due <= lmp:
            raise ValidationError("Due date must be after the last menstrual period", field_name="due_date")

class DeliverySchema(Schema):
    delivery_date = fields.Date(load_default=None)

class OnboardingModeSchema(Schema):
    mode = fields.Str(required=True, validate=validate.OneOf([UserMode.PREGNANCY.value, UserMode.POSTPARTUM.value]))
