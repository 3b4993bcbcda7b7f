from marshmallow import fields, validate

from muaythai.extensions import ma
from muaythai.schemas.common import PartialUpdateSchema, text_field


class ClassCreateSchema(ma.Schema):
    name_th = text_field(255, required=True)
    name_en = text_field(255, required=True)
    description_th = text_field(5000)
    description_en = text_field(5000)


class ClassUpdateSchema(PartialUpdateSchema):
    name_th = fields.String(validate=validate.Length(min=1, max=255))
    name_en = fields.String(validate=validate.Length(min=1, max=255))
    description_th = text_field(5000)
    description_en = text_field(5000)
