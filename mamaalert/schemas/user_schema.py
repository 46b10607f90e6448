from marshmallow import Schema, fields, validate

class RegisterSchema(Schema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=6))
    first_name = fields.Str(required=True, validate=validate.Length(min=1, max=80))
    last_name = fields.Str(load_default="", validate=validate.Length(max=80))
    phone = fields.Str(allow_none=True, validate=validate.Length(max=30))

class LoginSchema(Schema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True)

class ProfileUpdateSchema(Schema):
    first_name = fields.Str(validate=validate.Length(min=1, max=80))
    last_name = fields.Str(validate=validate.Length(max=80))
    phone = fields.Str(allow_none=True, validate=validate.Length(max=30))
