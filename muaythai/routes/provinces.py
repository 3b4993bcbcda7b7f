# muaythai/routes/provinces.py
from flask import Blueprint

from muaythai.errors import ValidationError
from muaythai.schemas.province import ProvinceQuerySchema
from muaythai.services import provinces as province_service
from muaythai.utils.request import load_args
from muaythai.utils.responses import success

provinces_bp = Blueprint("provinces", __name__)

province_query_schema = ProvinceQuerySchema()


@provinces_bp.route("/provinces", methods=["GET"])
def list_provinces():
    params = load_args(province_query_schema)
    if params["stats"]:
        return success(province_service.get_provinces_with_gym_counts())
    if params["region"]:
        provinces = province_service.get_provinces_by_region(params["region"])
    else:
        provinces = province_service.get_all_provinces(params["sort"])
    return success([province.to_dict() for province in provinces])


@provinces_bp.route("/provinces/stats", methods=["GET"])
def province_stats():
    return success(province_service.get_province_stats())


@provinces_bp.route("/provinces/<int:province_id>", methods=["GET"])
def get_province(province_id):
    return success(province_service.get_province_by_id(province_id).to_dict())


@provinces_bp.route("/provinces/search/<string:query>", methods=["GET"])
def search_provinces(query):
    return success([province.to_dict() for province in province_service.search_provinces(query)])


@provinces_bp.route("/provinces/region/<string:region>", methods=["GET"])
def provinces_by_region(region):
    if region.lower() not in province_service.REGIONS:
        raise ValidationError(f"Invalid region. Must be one of: {', '.join(province_service.REGIONS)}")
    provinces = province_service.get_provinces_by_region(region)
    return success([province.to_dict() for province in provinces])
