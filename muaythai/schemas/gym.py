from marshmallow import fields, validate

from muaythai.extensions import ma
from muaythai.schemas.common import (
    PaginationQuerySchema,
    PartialUpdateSchema,
    QuerySchema,
    line_id_field,
    phone_field,
    text_field,
)


class GymQuerySchema(PaginationQuerySchema):
    search = fields.String(load_default=None)
    province_id = fields.Integer(data_key="provinceId", load_default=None, validate=validate.Range(min=1))
    include_inactive = fields.Boolean(data_key="includeInactive", load_default=False)


class GymSearchQuerySchema(PaginationQuerySchema):
    q = fields.String(required=True, validate=validate.Length(min=1, max=255))


class GymDetailQuerySchema(QuerySchema):
    include_inactive = fields.Boolean(data_key="includeInactive", load_default=False)


class GymFieldsMixin:
    name_en = text_field(255)
    description_th = text_field(5000)
    description_en = text_field(5000)
    phone = phone_field()
    email = fields.Email(allow_none=True, validate=validate.Length(max=255))
    province_id = fields.Integer(allow_none=True, validate=validate.Range(min=1))
    map_url = fields.URL(allow_none=True)
    youtube_url = fields.URL(allow_none=True)
    line_id = line_id_field()
    tag_ids = fields.List(fields.Integer(validate=validate.Range(min=1)))
    trainer_ids = fields.List(fields.UUID())


class GymCreateSchema(GymFieldsMixin, ma.Schema):
    name_th = text_field(255, required=True)


class GymUpdateSchema(GymFieldsMixin, PartialUpdateSchema):
    name_th = fields.String(validate=validate.Length(min=1, max=255))
    is_active = fields.Boolean()


class GymImageSchema(ma.Schema):
    image_url = fields.URL(required=True)
