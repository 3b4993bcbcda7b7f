from marshmallow import fields, validate

from muaythai.extensions import ma
from muaythai.schemas.common import PaginationQuerySchema, PartialUpdateSchema, text_field

TAG_SORT_FIELDS = ["name_th", "name_en", "id", "created_at", "updated_at"]


class TagQuerySchema(PaginationQuerySchema):
    page_size = fields.Integer(data_key="pageSize", load_default=20, validate=validate.Range(min=1, max=100))
    search_term = fields.String(data_key="searchTerm", load_default=None)
    sort_field = fields.String(data_key="sortField", load_default="updated_at", validate=validate.OneOf(TAG_SORT_FIELDS))
    sort_by = fields.String(data_key="sortBy", load_default="desc", validate=validate.OneOf(["asc", "desc"]))


class TagCreateSchema(ma.Schema):
    name_th = text_field(100, required=True)
    name_en = text_field(100, required=True)


class TagUpdateSchema(PartialUpdateSchema):
    name_th = fields.String(validate=validate.Length(min=1, max=100))
    name_en = fields.String(validate=validate.Length(min=1, max=100))
