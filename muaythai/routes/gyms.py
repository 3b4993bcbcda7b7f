# muaythai/routes/gyms.py
from flask import Blueprint

from muaythai.errors import NotFoundError
from muaythai.schemas.gym import (
    GymCreateSchema,
    GymDetailQuerySchema,
    GymImageSchema,
    GymQuerySchema,
    GymSearchQuerySchema,
    GymUpdateSchema,
)
from muaythai.services import gyms as gym_service
from muaythai.services.provinces import get_province_by_id
from muaythai.utils.decorators import auth_required
from muaythai.utils.request import load_args, load_json
from muaythai.utils.responses import success

gyms_bp = Blueprint("gyms", __name__)

gym_query_schema = GymQuerySchema()
gym_search_schema = GymSearchQuerySchema()
gym_detail_schema = GymDetailQuerySchema()
gym_create_schema = GymCreateSchema()
gym_update_schema = GymUpdateSchema()
gym_image_schema = GymImageSchema()


@gyms_bp.route("/gyms", methods=["GET"])
def list_gyms():
    params = load_args(gym_query_schema)
    return success(gym_service.get_all_gyms(**params))


@gyms_bp.route("/gyms/search", methods=["GET"])
def search_gyms():
    params = load_args(gym_search_schema)
    return success(gym_service.search_gyms(params["q"], params["page"], params["page_size"]))


@gyms_bp.route("/gyms/<uuid:gym_id>", methods=["GET"])
def get_gym(gym_id):
    params = load_args(gym_detail_schema)
    gym = gym_service.get_gym_by_id(gym_id, include_inactive=params["include_inactive"])
    return success(gym.to_dict(include_details=True))


@gyms_bp.route("/gyms/<uuid:gym_id>/images", methods=["GET"])
def get_gym_images(gym_id):
    images = gym_service.get_gym_images(gym_id)
    return success([image.to_dict() for image in images])


@gyms_bp.route("/provinces/<int:province_id>/gyms", methods=["GET"])
def get_gyms_by_province(province_id):
    get_province_by_id(province_id)
    gyms = gym_service.get_gyms_by_province(province_id)
    return success([gym.to_dict() for gym in gyms])


# ================================
# Admin operations
# ================================

@gyms_bp.route("/gyms", methods=["POST"])
@auth_required
def create_gym():
    data = load_json(gym_create_schema)
    gym = gym_service.create_gym(data)
    return success(gym.to_dict(include_details=True), "Gym created successfully", 201)


@gyms_bp.route("/gyms/<uuid:gym_id>", methods=["PUT"])
@auth_required
def update_gym(gym_id):
    data = load_json(gym_update_schema)
    gym = gym_service.update_gym(gym_id, data)
    return success(gym.to_dict(include_details=True), "Gym updated successfully")


@gyms_bp.route("/gyms/<uuid:gym_id>", methods=["DELETE"])
@auth_required
def delete_gym(gym_id):
    if not gym_service.delete_gym(gym_id):
        raise NotFoundError("Gym", gym_id)
    return success(message="Gym deleted successfully")


@gyms_bp.route("/gyms/<uuid:gym_id>/images", methods=["POST"])
@auth_required
def add_gym_image(gym_id):
    data = load_json(gym_image_schema)
    image = gym_service.add_gym_image(gym_id, data["image_url"])
    return success(image.to_dict(), "Image added successfully", 201)


@gyms_bp.route("/gyms/images/<uuid:image_id>", methods=["DELETE"])
@auth_required
def remove_gym_image(image_id):
    if not gym_service.remove_gym_image(image_id):
        raise NotFoundError("Gym image", image_id)
    return success(message="Image removed successfully")
