from marshmallow import Schema, fields, validate
from mamaalert.utils.enums import SymptomSeverity, LaborSignSeverity

class SymptomLogSchema(Schema):
    symptom = fields.Str(required=True, validate=validate.Length(min=1, max=120))
    severity = fields.Str(load_default=SymptomSeverity.MILD.value, validate=validate.OneOf([e.value for e in SymptomSeverity]))
    description = fields.Str(allow_none=True)

class LaborSignSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1))
    severity = fields.Str(required=True, validate=validate.OneOf([e.value for e in LaborSignSeverity]))
    is_active = fields.Bool(load_default=False)

class LaborWatchSchema(Schema):
    signs = fields.List(fields.Nested(LaborSignSchema), required=True)
