from marshmallow import fields, validate, validates_schema, ValidationError

from muaythai.extensions import ma
from muaythai.schemas.common import (
    PaginationQuerySchema,
    PartialUpdateSchema,
    QuerySchema,
    line_id_field,
    phone_field,
    text_field,
)


class TrainerQuerySchema(PaginationQuerySchema):
    search = fields.String(load_default=None)
    province_id = fields.Integer(data_key="provinceId", load_default=None, validate=validate.Range(min=1))
    gym_id = fields.UUID(data_key="gymId", load_default=None)
    is_freelance = fields.Boolean(data_key="isFreelance", load_default=None)
    include_inactive = fields.Boolean(data_key="includeInactive", load_default=False)
    include_classes = fields.Boolean(data_key="includeClasses", load_default=False)
    unassigned_only = fields.Boolean(data_key="unassignedOnly", load_default=False)


class TrainerDetailQuerySchema(QuerySchema):
    include_inactive = fields.Boolean(data_key="includeInactive", load_default=False)


class TrainerFieldsMixin:
    last_name_th = text_field(100)
    last_name_en = text_field(100)
    bio_th = text_field(5000)
    bio_en = text_field(5000)
    phone = phone_field()
    email = fields.Email(allow_none=True, validate=validate.Length(max=255))
    line_id = line_id_field()
    gym_id = fields.UUID(allow_none=True)
    province_id = fields.Integer(allow_none=True, validate=validate.Range(min=1))
    exp_year = fields.Integer(allow_none=True, validate=validate.Range(min=0, max=100))
    tag_ids = fields.List(fields.Integer(validate=validate.Range(min=1)))
    class_ids = fields.List(fields.UUID())


class TrainerCreateSchema(TrainerFieldsMixin, ma.Schema):
    first_name_th = text_field(100, required=True)
    first_name_en = text_field(100, required=True)
    is_freelance = fields.Boolean(load_default=False)

    @validates_schema
    def freelance_has_no_gym(self, data, **kwargs):
        if data.get("is_freelance") and data.get("gym_id"):
            raise ValidationError("Freelance trainers cannot be assigned to a gym", "gym_id")


class TrainerUpdateSchema(TrainerFieldsMixin, PartialUpdateSchema):
    first_name_th = fields.String(validate=validate.Length(min=1, max=100))
    first_name_en = fields.String(validate=validate.Length(min=1, max=100))
    is_freelance = fields.Boolean()
    is_active = fields.Boolean()

    @validates_schema
    def freelance_has_no_gym(self, data, **kwargs):
        if data.get("is_freelance") and data.get("gym_id"):
            raise ValidationError("Freelance trainers cannot be assigned to a gym", "gym_id")


class TrainerClassSchema(ma.Schema):
    class_id = fields.UUID(required=True)


class TrainerSelectionQuerySchema(QuerySchema):
    page = fields.Integer(load_default=1, validate=validate.Range(min=1))
    page_size = fields.Integer(data_key="pageSize", load_default=50, validate=validate.Range(min=1, max=100))
    search_term = fields.String(data_key="searchTerm", load_default=None)
    province_id = fields.Integer(data_key="provinceId", load_default=None, validate=validate.Range(min=1))
    exclude_ids = fields.String(data_key="excludeIds", load_default=None)
    sort_by = fields.String(
        data_key="sortBy", load_default="name", validate=validate.OneOf(["name", "experience", "recent"])
    )


class TrainerQuickSearchSchema(QuerySchema):
    q = fields.String(load_default="")
    limit = fields.Integer(load_default=10, validate=validate.Range(min=1, max=50))
