from flask import request

from muaythai.errors import ValidationError


def load_json(schema):
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return schema.load(data)


def load_args(schema):
    return schema.load(request.args.to_dict())
