from marshmallow import fields, validate

from muaythai.schemas.common import QuerySchema
from muaythai.services.provinces import REGIONS


class ProvinceQuerySchema(QuerySchema):
    sort = fields.String(load_default="en", validate=validate.OneOf(["en", "th"]))
    region = fields.String(load_default=None, validate=validate.OneOf(list(REGIONS)))
    stats = fields.Boolean(load_default=False)
