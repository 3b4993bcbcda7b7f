from marshmallow import fields, validate, pre_load

from muaythai.extensions import ma
from muaythai.models.admin_user import ADMIN_ROLES
from muaythai.schemas.common import PartialUpdateSchema

# bcrypt only looks at the first 72 bytes
password_length = validate.Length(min=8, max=72, error="Password must be between 8 and 72 characters")


class NormalizeEmailMixin:
    @pre_load
    def normalize_email(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("email"), str):
            data = {**data, "email": data["email"].strip().lower()}
        return data


class AdminUserCreateSchema(NormalizeEmailMixin, ma.Schema):
    email = fields.Email(required=True, validate=validate.Length(max=255))
    password = fields.String(required=True, load_only=True, validate=password_length)
    role = fields.String(load_default="staff", validate=validate.OneOf(ADMIN_ROLES))


class AdminUserUpdateSchema(NormalizeEmailMixin, PartialUpdateSchema):
    email = fields.Email(validate=validate.Length(max=255))
    password = fields.String(load_only=True, validate=password_length)
    role = fields.String(validate=validate.OneOf(ADMIN_ROLES))
    is_active = fields.Boolean()


class LoginSchema(NormalizeEmailMixin, ma.Schema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))


class LogoutSchema(ma.Schema):
    refresh_token = fields.String(load_default=None)
