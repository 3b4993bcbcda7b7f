from marshmallow import EXCLUDE, fields, validate, validates_schema, ValidationError

from muaythai.extensions import ma

PHONE_PATTERN = r"^[0-9\-+\s()]+$"
LINE_ID_PATTERN = r"^@?[a-zA-Z0-9._-]+$"
MAX_PAGE_SIZE = 100


def phone_field(**kwargs):
    return fields.String(
        allow_none=True,
        validate=[
            validate.Length(max=50),
            validate.Regexp(PHONE_PATTERN, error="Invalid phone number format"),
        ],
        **kwargs,
    )


def line_id_field(**kwargs):
    return fields.String(
        allow_none=True,
        validate=[
            validate.Length(max=100),
            validate.Regexp(LINE_ID_PATTERN, error="Invalid LINE ID format"),
        ],
        **kwargs,
    )


def text_field(max_length, required=False):
    if required:
        return fields.String(required=True, validate=validate.Length(min=1, max=max_length))
    return fields.String(allow_none=True, validate=validate.Length(max=max_length))


class QuerySchema(ma.Schema):
    """Query strings carry unrelated parameters, so unknown keys are dropped."""

    class Meta:
        unknown = EXCLUDE


class PaginationQuerySchema(QuerySchema):
    page = fields.Integer(load_default=1, validate=validate.Range(min=1))
    page_size = fields.Integer(
        data_key="pageSize", load_default=10, validate=validate.Range(min=1, max=MAX_PAGE_SIZE)
    )


class PartialUpdateSchema(ma.Schema):
    """Update payloads must change at least one field."""

    @validates_schema
    def require_one_field(self, data, **kwargs):
        if not data:
            raise ValidationError("At least one field must be provided for update", "_schema")
