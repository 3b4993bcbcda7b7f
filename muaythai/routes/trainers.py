# muaythai/routes/trainers.py
from flask import Blueprint

from muaythai.errors import NotFoundError
from muaythai.schemas.trainer import (
    TrainerClassSchema,
    TrainerCreateSchema,
    TrainerDetailQuerySchema,
    TrainerQuerySchema,
    TrainerUpdateSchema,
)
from muaythai.schemas.common import PaginationQuerySchema
from muaythai.services import trainers as trainer_service
from muaythai.utils.decorators import auth_required
from muaythai.utils.request import load_args, load_json
from muaythai.utils.responses import success

trainers_bp = Blueprint("trainers", __name__)

trainer_query_schema = TrainerQuerySchema()
trainer_detail_schema = TrainerDetailQuerySchema()
trainer_create_schema = TrainerCreateSchema()
trainer_update_schema = TrainerUpdateSchema()
trainer_class_schema = TrainerClassSchema()
pagination_schema = PaginationQuerySchema()


def _full(trainer):
    return trainer.to_dict(include_classes=True, include_tags=True)


@trainers_bp.route("/trainers", methods=["GET"])
def list_trainers():
    params = load_args(trainer_query_schema)
    return success(trainer_service.get_all_trainers(**params))


@trainers_bp.route("/trainers/<uuid:trainer_id>", methods=["GET"])
def get_trainer(trainer_id):
    params = load_args(trainer_detail_schema)
    trainer = trainer_service.get_trainer_by_id(trainer_id, include_inactive=params["include_inactive"])
    return success(_full(trainer))


@trainers_bp.route("/trainers/gym/<uuid:gym_id>", methods=["GET"])
def get_trainers_by_gym(gym_id):
    return success([t.to_dict() for t in trainer_service.get_trainers_by_gym(gym_id)])


@trainers_bp.route("/trainers/province/<int:province_id>", methods=["GET"])
def get_trainers_by_province(province_id):
    return success([t.to_dict() for t in trainer_service.get_trainers_by_province(province_id)])


@trainers_bp.route("/trainers/freelance", methods=["GET"])
def get_freelance_trainers():
    return success([t.to_dict() for t in trainer_service.get_freelance_trainers()])


@trainers_bp.route("/trainers/unassigned", methods=["GET"])
def get_unassigned_trainers():
    return success([t.to_dict() for t in trainer_service.get_unassigned_trainers()])


@trainers_bp.route("/trainers/search/<string:query>", methods=["GET"])
def search_trainers(query):
    params = load_args(pagination_schema)
    return success(trainer_service.search_trainers(query, params["page"], params["page_size"]))


@trainers_bp.route("/trainers/<uuid:trainer_id>/classes", methods=["GET"])
def get_trainer_classes(trainer_id):
    classes = trainer_service.get_trainer_classes(trainer_id)
    return success([training_class.to_dict() for training_class in classes])


# ================================
# Admin operations
# ================================

@trainers_bp.route("/trainers", methods=["POST"])
@auth_required
def create_trainer():
    data = load_json(trainer_create_schema)
    trainer = trainer_service.create_trainer(data)
    return success(_full(trainer), "Trainer created successfully", 201)


@trainers_bp.route("/trainers/<uuid:trainer_id>", methods=["PUT"])
@auth_required
def update_trainer(trainer_id):
    data = load_json(trainer_update_schema)
    trainer = trainer_service.update_trainer(trainer_id, data)
    return success(_full(trainer), "Trainer updated successfully")


@trainers_bp.route("/trainers/<uuid:trainer_id>", methods=["DELETE"])
@auth_required
def delete_trainer(trainer_id):
    if not trainer_service.delete_trainer(trainer_id):
        raise NotFoundError("Trainer", trainer_id)
    return success(message="Trainer deleted successfully")


@trainers_bp.route("/trainers/<uuid:trainer_id>/classes", methods=["POST"])
@auth_required
def add_trainer_class(trainer_id):
    data = load_json(trainer_class_schema)
    trainer = trainer_service.add_trainer_class(trainer_id, data["class_id"])
    classes = [training_class.to_dict() for training_class in trainer.classes]
    return success(classes, "Class added to trainer", 201)


@trainers_bp.route("/trainers/<uuid:trainer_id>/classes/<uuid:class_id>", methods=["DELETE"])
@auth_required
def remove_trainer_class(trainer_id, class_id):
    if not trainer_service.remove_trainer_class(trainer_id, class_id):
        raise NotFoundError("Trainer class", class_id)
    return success(message="Class removed from trainer")
